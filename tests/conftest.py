"""Shared fixtures for subsocial_api tests."""

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from pytest_mock import MockerFixture

from subsocial_api.models.content import UseServer
from subsocial_api.service.ipfs_client import IPFSClient
from subsocial_api.service.substrate_client import SubstrateClient

IPFS_NODE_URL = "http://ipfs.test:5001"
OFFCHAIN_URL = "http://offchain.test:3001"

NODE_API = f"{IPFS_NODE_URL}/api/v0"
OFFCHAIN_API = f"{OFFCHAIN_URL}/v1"

CID_A = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"
CID_B = "QmT78zSuBmuS4z925WZfrqQ1qHaJ56DQaTfyMUF7F8ff5o"
CID_C = "QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn"


@pytest.fixture
def cids() -> List[str]:
    return [CID_A, CID_B, CID_C]


@pytest.fixture
def node_client() -> IPFSClient:
    """Client that reads straight from the IPFS node."""
    return IPFSClient(ipfs_node_url=IPFS_NODE_URL, offchain_url=OFFCHAIN_URL, timeout=5)


@pytest.fixture
def offchain_post_client() -> IPFSClient:
    return IPFSClient(
        ipfs_node_url=IPFS_NODE_URL,
        offchain_url=OFFCHAIN_URL,
        use_server=UseServer(http_request_method="post"),
        timeout=5,
    )


@pytest.fixture
def offchain_get_client() -> IPFSClient:
    return IPFSClient(
        ipfs_node_url=IPFS_NODE_URL,
        offchain_url=OFFCHAIN_URL,
        use_server=UseServer(http_request_method="get"),
        timeout=5,
    )


@pytest.fixture
def chain_state() -> Dict[str, Dict[Any, Any]]:
    """Storage of a fake Social pallet, keyed by storage function then id."""
    return {
        "BlogById": {
            1: {"id": 1, "owner": "5Alice", "handle": "alice", "content": {"IPFS": CID_A}},
            2: {"id": 2, "owner": "5Bob", "handle": None, "content": "None"},
        },
        "PostById": {
            10: {"id": 10, "blog_id": 1, "content": {"IPFS": "0x" + CID_B.encode().hex()}},
        },
        "CommentById": {
            100: {"id": 100, "post_id": 10, "parent_id": None, "content": {"IPFS": CID_C}},
        },
        "SocialAccountById": {
            "5Alice": {
                "followers_count": 3,
                "following_accounts_count": 1,
                "following_blogs_count": 2,
                "reputation": 7,
                "profile": {"handle": "alice", "content": {"IPFS": CID_A}},
            },
        },
    }


@pytest.fixture
def substrate(mocker: MockerFixture, chain_state: Dict[str, Dict[Any, Any]]):
    """Stand-in for a connected SubstrateInterface."""
    handle = mocker.MagicMock()
    handle.create_storage_key.side_effect = lambda pallet, function, params: (
        pallet,
        function,
        params[0],
    )
    handle.query_multi.side_effect = lambda keys: [
        (key, SimpleNamespace(value=chain_state.get(key[1], {}).get(key[2])))
        for key in keys
    ]
    return handle


@pytest.fixture
def substrate_client(substrate) -> SubstrateClient:
    return SubstrateClient(substrate, pallet="Social")
