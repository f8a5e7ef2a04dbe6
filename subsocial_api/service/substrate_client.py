import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from substrateinterface import SubstrateInterface

from ..config import Config
from ..models.structs import Blog, Comment, Post, SocialAccount, StructId
from ..utils import first_or_none

T = TypeVar("T", bound=BaseModel)

STRUCT_MODELS: Dict[str, Type[BaseModel]] = {
    "BlogById": Blog,
    "PostById": Post,
    "CommentById": Comment,
    "SocialAccountById": SocialAccount,
}


class SubstrateClient:
    """Reads social structs from a connected Substrate node.

    Lookups are best effort: a failed query is logged and reported as an empty
    result, so callers cannot tell a missing id from an unreachable node.
    """

    def __init__(
        self,
        substrate: SubstrateInterface,
        pallet: str = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.substrate = substrate
        self._lock = threading.Lock()
        self.pallet = pallet or Config.SUBSTRATE_PALLET
        self.logger = logger or logging.getLogger(f"{__name__}.{type(self).__name__}")
        self.logger.info(f"Created {type(self).__name__} instance for pallet {self.pallet}")

    @classmethod
    def connect(cls, url: str = None, **kwargs) -> "SubstrateClient":
        return cls(SubstrateInterface(url=url or Config.SUBSTRATE_URL), **kwargs)

    def _query_multi(self, storage_function: str, ids: Sequence[StructId]) -> List[Any]:
        # one request at a time on the shared websocket connection
        with self._lock:
            storage_keys = [
                self.substrate.create_storage_key(self.pallet, storage_function, [struct_id])
                for struct_id in ids
            ]
            return [obj for _, obj in self.substrate.query_multi(storage_keys)]

    # Multiple

    async def find_structs(
        self, storage_function: str, ids: Sequence[StructId], model: Type[T] = None
    ) -> List[T]:
        if not ids:
            return []

        model = model or STRUCT_MODELS[storage_function]

        try:
            results = await asyncio.to_thread(self._query_multi, storage_function, list(ids))
            values = [_unwrap(obj) for obj in results]
            return [model.model_validate(value) for value in values if value is not None]
        except Exception as e:
            self.logger.error(
                f"Failed to load structs from Substrate by {len(ids)} id(s) via {storage_function}: {e}",
                exc_info=True
            )
            return []

    async def find_blogs(self, ids: Sequence[StructId]) -> List[Blog]:
        return await self.find_structs("BlogById", ids)

    async def find_posts(self, ids: Sequence[StructId]) -> List[Post]:
        return await self.find_structs("PostById", ids)

    async def find_comments(self, ids: Sequence[StructId]) -> List[Comment]:
        return await self.find_structs("CommentById", ids)

    async def find_social_accounts(self, account_ids: Sequence[str]) -> List[SocialAccount]:
        return await self.find_structs("SocialAccountById", account_ids)

    # Single

    async def find_blog(self, struct_id: StructId) -> Optional[Blog]:
        return first_or_none(await self.find_blogs([struct_id]))

    async def find_post(self, struct_id: StructId) -> Optional[Post]:
        return first_or_none(await self.find_posts([struct_id]))

    async def find_comment(self, struct_id: StructId) -> Optional[Comment]:
        return first_or_none(await self.find_comments([struct_id]))

    async def find_social_account(self, account_id: str) -> Optional[SocialAccount]:
        return first_or_none(await self.find_social_accounts([account_id]))


def _unwrap(obj: Any) -> Any:
    # query_multi yields either nothing or a decoded object whose value is None for an empty Option
    if obj is None:
        return None
    return getattr(obj, "value", obj)
