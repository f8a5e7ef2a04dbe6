from .config import Config, configure_logging
from .models import (
    Blog,
    Comment,
    CommentContent,
    CommonContent,
    Content,
    ContentResult,
    Post,
    PostContent,
    Profile,
    ProfileContent,
    SocialAccount,
    SpaceContent,
    UseServer,
)
from .service import (
    IPFSClient,
    SubstrateClient,
    UnsupportedEnvironmentError,
    get_cids_of_structs,
    get_ipfs_cid_of_social_account,
    get_ipfs_cid_of_struct,
)

__version__ = "1.0.0"

__all__ = [
    "Config",
    "configure_logging",
    "Blog",
    "Comment",
    "CommentContent",
    "CommonContent",
    "Content",
    "ContentResult",
    "Post",
    "PostContent",
    "Profile",
    "ProfileContent",
    "SocialAccount",
    "SpaceContent",
    "UseServer",
    "IPFSClient",
    "SubstrateClient",
    "UnsupportedEnvironmentError",
    "get_cids_of_structs",
    "get_ipfs_cid_of_social_account",
    "get_ipfs_cid_of_struct",
]
