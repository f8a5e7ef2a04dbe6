import asyncio
import io
import logging
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

import httpx
from pydantic import BaseModel

from ..config import Config
from ..models.content import (
    CommentContent,
    CommonContent,
    ContentResult,
    PostContent,
    SpaceContent,
    UseServer,
)
from ..utils import IpfsCid, as_ipfs_cid, get_unique_ids, is_ipfs_cid, non_empty_str, pluralize

FileInput = Union[bytes, bytearray, BinaryIO]


class UnsupportedEnvironmentError(RuntimeError):
    """Raised when a file upload is attempted with something that cannot be sent as a file."""


class IPFSClient:
    """Loads and stores social content on IPFS.

    Content is read either straight from an IPFS node or, when ``use_server``
    is given, through the offchain gateway. Writes always go through the
    gateway. The mode is fixed for the lifetime of the client.
    """

    def __init__(
        self,
        ipfs_node_url: str = None,
        offchain_url: str = None,
        use_server: Optional[UseServer] = None,
        timeout: float = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.ipfs_node_url = f"{(ipfs_node_url or Config.IPFS_NODE_URL).rstrip('/')}/api/v0"
        self.offchain_url = f"{(offchain_url or Config.OFFCHAIN_URL).rstrip('/')}/v1"
        self.use_server = use_server
        self.timeout = timeout or Config.IPFS_TIMEOUT
        self.logger = logger or logging.getLogger(f"{__name__}.{type(self).__name__}")

    @classmethod
    async def create(cls, **kwargs) -> "IPFSClient":
        """Build a client and probe the IPFS node once."""
        client = cls(**kwargs)
        await client.check_connection()
        return client

    async def check_connection(self) -> bool:
        if self.use_server:
            return True

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._ipfs_node_request(client, "version")
                response.raise_for_status()
                version = response.json().get("Version")
                self.logger.info(f"Connected to IPFS Node with version {version}")
                return True
        except Exception as e:
            self.logger.error(f"Failed to connect to IPFS node: {e}")
            return False

    async def _ipfs_node_request(
        self, client: httpx.AsyncClient, endpoint: str, cid: str = None
    ) -> httpx.Response:
        params = {"arg": cid} if cid is not None else None
        return await client.get(f"{self.ipfs_node_url}/{endpoint}", params=params)

    # Find multiple

    def get_unique_cids(
        self, cids: Sequence[IpfsCid], content_name: str = None, skip_invalid: bool = False
    ) -> List[str]:
        content_name = f"{content_name} content" if non_empty_str(content_name) else "content"

        if skip_invalid:
            invalid = [cid for cid in cids if not is_ipfs_cid(cid)]
            if invalid:
                self.logger.warning(f"Skipping {len(invalid)} invalid {content_name} cid(s): {invalid}")
            cids = [cid for cid in cids if is_ipfs_cid(cid)]

        ipfs_cids = get_unique_ids(as_ipfs_cid(cid) for cid in cids)

        if not ipfs_cids:
            self.logger.debug(f"No {content_name} to load from IPFS: no cids provided")

        return ipfs_cids

    async def get_content_array_from_ipfs(
        self, cids: Sequence[str], content_name: str = "content"
    ) -> ContentResult:
        content: ContentResult = {}

        async def load_content(client: httpx.AsyncClient, cid: str):
            response = await self._ipfs_node_request(client, "dag/get", cid)
            response.raise_for_status()
            content[cid] = response.json()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                await asyncio.gather(*(load_content(client, cid) for cid in cids))
        except Exception as e:
            self.logger.error(f"Failed to load {content_name}(s) by {len(cids)} cid(s): {e}")
            return {}

        self.logger.debug(f"Loaded {pluralize(len(content), content_name)}")
        return content

    async def get_content_array_from_offchain(
        self, cids: Sequence[str], content_name: str = "content"
    ) -> ContentResult:
        url = f"{self.offchain_url}/ipfs/get"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if self.use_server and self.use_server.http_request_method == "get":
                    response = await client.get(url, params={"cids": list(cids)})
                else:
                    response = await client.post(url, json={"cids": list(cids)})

            if response.status_code != 200:
                self.logger.error(
                    f"Offchain server responded with status code {response.status_code} and message: {response.text}"
                )
                return {}

            contents = response.json()
            self.logger.debug(f"Loaded {pluralize(len(contents), content_name)}")
            return contents
        except Exception as e:
            self.logger.error(f"Failed to get content from IPFS via Offchain API: {e}")
            return {}

    async def get_content_array(
        self, cids: Sequence[IpfsCid], content_name: str = "content"
    ) -> ContentResult:
        try:
            ipfs_cids = self.get_unique_cids(cids, content_name, skip_invalid=bool(self.use_server))
        except ValueError as e:
            self.logger.error(f"Failed to load {content_name}(s) by {len(cids)} cid(s): {e}")
            return {}

        if not ipfs_cids:
            return {}

        if self.use_server:
            return await self.get_content_array_from_offchain(ipfs_cids, content_name)
        return await self.get_content_array_from_ipfs(ipfs_cids, content_name)

    async def find_spaces(self, cids: Sequence[IpfsCid]) -> ContentResult:
        return await self.get_content_array(cids, "space")

    async def find_posts(self, cids: Sequence[IpfsCid]) -> ContentResult:
        return await self.get_content_array(cids, "post")

    async def find_comments(self, cids: Sequence[IpfsCid]) -> ContentResult:
        return await self.get_content_array(cids, "comment")

    async def find_profiles(self, cids: Sequence[IpfsCid]) -> ContentResult:
        return await self.get_content_array(cids, "account")

    # Find single

    async def get_content(self, cid: IpfsCid, content_name: str = None) -> Optional[Dict[str, Any]]:
        content = await self.get_content_array([cid], content_name or "content")
        if not content:
            return None
        return content.get(as_ipfs_cid(cid))

    async def find_space(self, cid: IpfsCid) -> Optional[Dict[str, Any]]:
        return await self.get_content(cid, "space")

    async def find_post(self, cid: IpfsCid) -> Optional[Dict[str, Any]]:
        return await self.get_content(cid, "post")

    async def find_comment(self, cid: IpfsCid) -> Optional[Dict[str, Any]]:
        return await self.get_content(cid, "comment")

    async def find_profile(self, cid: IpfsCid) -> Optional[Dict[str, Any]]:
        return await self.get_content(cid, "account")

    # Remove

    async def remove_content(self, cid: IpfsCid) -> None:
        """Unpin content on the offchain gateway. Failures are only logged."""
        url = f"{self.offchain_url}/ipfs/pins/{cid}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.delete(url)

            if response.status_code != 200:
                self.logger.error(
                    f"Offchain server responded with status code {response.status_code} and message: {response.text}"
                )
                return

            self.logger.info(f"Unpinned content with hash: {cid}")
        except Exception as e:
            self.logger.error(f"Failed to unpin content in IPFS via offchain: {e}")

    # Save

    async def save_content(self, content: Union[CommonContent, Dict[str, Any]]) -> Optional[str]:
        """Add and pin content on IPFS through the offchain gateway.

        Returns:
            The CID of the stored content, or None if the gateway refused it.
        """
        url = f"{self.offchain_url}/ipfs/add"
        payload = content.model_dump(exclude_none=True) if isinstance(content, BaseModel) else content

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload)

            if response.status_code != 200:
                self.logger.error(
                    f"Offchain server responded with status code {response.status_code} and message: {response.text}"
                )
                return None

            return response.json()
        except Exception as e:
            self.logger.error(f"Failed to add content to IPFS via offchain: {e}")
            return None

    async def save_file(self, file: FileInput, filename: str = None) -> Optional[str]:
        if isinstance(file, (bytes, bytearray)):
            file = io.BytesIO(bytes(file))
        elif isinstance(file, io.TextIOBase) or not callable(getattr(file, "read", None)):
            raise UnsupportedEnvironmentError(
                f"File upload needs bytes or a binary file object, got {type(file).__name__}"
            )

        url = f"{self.offchain_url}/ipfs/addFile"
        filename = filename or getattr(file, "name", None) or "blob"
        files = {"file": (str(filename), file)}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, files=files)

            if response.status_code != 200:
                self.logger.error(
                    f"Offchain server responded with status code {response.status_code} and message: {response.text}"
                )
                return None

            return response.json()
        except Exception as e:
            self.logger.error(f"Failed to add file to IPFS via offchain: {e}")
            return None

    async def save_space(self, content: SpaceContent) -> Optional[str]:
        cid = await self.save_content(content)
        self.logger.debug(f"Saved space with hash: {cid}")
        return cid

    async def save_post(self, content: PostContent) -> Optional[str]:
        cid = await self.save_content(content)
        self.logger.debug(f"Saved post with hash: {cid}")
        return cid

    async def save_comment(self, content: CommentContent) -> Optional[str]:
        cid = await self.save_content(content)
        self.logger.debug(f"Saved comment with hash: {cid}")
        return cid
