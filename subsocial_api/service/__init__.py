from .substrate_client import SubstrateClient
from .ipfs_client import IPFSClient, UnsupportedEnvironmentError
from .cids import get_cids_of_structs, get_ipfs_cid_of_social_account, get_ipfs_cid_of_struct

__all__ = [
    "SubstrateClient",
    "IPFSClient",
    "UnsupportedEnvironmentError",
    "get_cids_of_structs",
    "get_ipfs_cid_of_social_account",
    "get_ipfs_cid_of_struct",
]
