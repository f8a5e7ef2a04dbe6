from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, ClassVar, Literal, Optional, Union

from ..utils import decode_hex_text

StructId = Union[int, str]

ContentKind = Literal["None", "Raw", "IPFS", "Hyper"]


class Content(BaseModel):
    """The `content` field of an on-chain struct.

    Accepts the shapes substrate-interface produces for the runtime enum:
    ``"None"``, ``{"IPFS": "Qm..."}`` or ``{"IPFS": "0x516d..."}``.
    """

    kind: ContentKind = "None"
    value: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_scale(cls, data: Any) -> Any:
        if data is None or data == "None":
            return {"kind": "None"}
        if isinstance(data, str):
            return {"kind": data}
        if isinstance(data, dict) and "kind" not in data and len(data) == 1:
            kind, value = next(iter(data.items()))
            return {"kind": kind, "value": decode_hex_text(value)}
        return data

    @property
    def is_ipfs(self) -> bool:
        return self.kind == "IPFS" and bool(self.value)

    def as_ipfs(self) -> str:
        if not self.is_ipfs:
            raise ValueError(f"Content is not an IPFS reference: {self.kind}")
        return self.value


class ContentStruct(BaseModel):
    """Base for on-chain structs that point at off-chain content."""

    model_config = ConfigDict(extra="allow")

    kind: ClassVar[str] = "content"

    content: Content = Field(default_factory=Content)


class Blog(ContentStruct):
    id: StructId
    owner: Optional[str] = None
    handle: Optional[str] = None


class Post(ContentStruct):
    id: StructId
    blog_id: Optional[StructId] = None


class Comment(ContentStruct):
    id: StructId
    post_id: Optional[StructId] = None
    parent_id: Optional[StructId] = None


class Profile(ContentStruct):
    handle: Optional[str] = None


class SocialAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    kind: ClassVar[str] = "social_account"

    followers_count: int = 0
    following_accounts_count: int = 0
    following_blogs_count: int = 0
    reputation: int = 0
    profile: Optional[Profile] = None
