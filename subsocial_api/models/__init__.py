from .content import (
    ContentResult,
    UseServer,
    CommonContent,
    SpaceContent,
    PostContent,
    CommentContent,
    ProfileContent,
)
from .structs import (
    StructId,
    Content,
    ContentStruct,
    Blog,
    Post,
    Comment,
    Profile,
    SocialAccount,
)

__all__ = [
    "ContentResult",
    "UseServer",
    "CommonContent",
    "SpaceContent",
    "PostContent",
    "CommentContent",
    "ProfileContent",
    "StructId",
    "Content",
    "ContentStruct",
    "Blog",
    "Post",
    "Comment",
    "Profile",
    "SocialAccount",
]
