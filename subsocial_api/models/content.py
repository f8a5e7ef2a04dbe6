from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional

ContentResult = Dict[str, Dict[str, Any]]


class UseServer(BaseModel):
    """Routes content requests through the offchain gateway instead of an IPFS node."""

    http_request_method: Literal["get", "post"] = Field(default="post")


class CommonContent(BaseModel):
    model_config = ConfigDict(extra="allow")


class SpaceContent(CommonContent):
    name: Optional[str] = None
    desc: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    links: List[str] = Field(default_factory=list)


class PostContent(CommonContent):
    title: Optional[str] = None
    body: Optional[str] = None
    image: Optional[str] = None
    canonical: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class CommentContent(CommonContent):
    body: str = ""


class ProfileContent(CommonContent):
    fullname: Optional[str] = None
    avatar: Optional[str] = None
    about: Optional[str] = None
