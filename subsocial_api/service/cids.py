from typing import Iterable, List, Optional, Union

from ..models.structs import ContentStruct, SocialAccount

HasIpfsCidSomewhere = Union[ContentStruct, SocialAccount]


def get_ipfs_cid_of_social_account(account: SocialAccount) -> Optional[str]:
    """Return the IPFS CID of the account's profile, if it has one."""
    if account.profile is None:
        return None
    return get_ipfs_cid_of_struct(account.profile)


def get_ipfs_cid_of_struct(struct: HasIpfsCidSomewhere) -> Optional[str]:
    """Return the IPFS CID referenced by a struct.

    Structs are told apart by their ``kind`` tag: ``"content"`` structs carry the
    CID in their ``content`` field, ``"social_account"`` structs in their profile.
    """
    kind = getattr(struct, "kind", None)

    if kind == "content":
        if struct.content.is_ipfs:
            return struct.content.as_ipfs()
        return None
    if kind == "social_account":
        return get_ipfs_cid_of_social_account(struct)

    raise TypeError(f"Cannot extract an IPFS CID from {type(struct).__name__}")


def get_cids_of_structs(structs: Iterable[HasIpfsCidSomewhere]) -> List[str]:
    cids = (get_ipfs_cid_of_struct(s) for s in structs)
    return [cid for cid in cids if cid is not None]
