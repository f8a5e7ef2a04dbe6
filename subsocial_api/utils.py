from typing import Any, Hashable, Iterable, List, Optional, Sequence, TypeVar, Union

from multiformats import CID

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

IpfsCid = Union[str, bytes, CID]


def decode_hex_text(value: Any) -> Any:
    """Turn a SCALE-decoded Vec<u8> ("0x..." hex) into text when it is valid UTF-8."""
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str) and value.startswith("0x"):
        try:
            raw = bytes.fromhex(value[2:])
        except ValueError:
            return value
    else:
        return value

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return value


def as_ipfs_cid(cid: IpfsCid) -> str:
    """Normalize a CID given as text, hex-encoded text or a CID object.

    Raises ValueError when the input is not a valid CID.
    """
    if isinstance(cid, CID):
        return str(cid)

    text = decode_hex_text(cid)
    if not isinstance(text, str):
        raise ValueError(f"Invalid IPFS CID: {cid!r}")

    text = text.strip()
    try:
        return str(CID.decode(text))
    except Exception as e:
        raise ValueError(f"Invalid IPFS CID: {cid!r}") from e


def is_ipfs_cid(cid: Any) -> bool:
    try:
        as_ipfs_cid(cid)
        return True
    except ValueError:
        return False


def get_unique_ids(ids: Iterable[H]) -> List[H]:
    """Drop duplicates, keeping the order of first occurrence."""
    return list(dict.fromkeys(ids))


def first_or_none(items: Sequence[T]) -> Optional[T]:
    return items[0] if items else None


def non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"
