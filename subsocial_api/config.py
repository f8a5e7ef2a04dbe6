import logging
import os
from typing import Optional

from .models.content import UseServer


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SUBSTRATE_URL: str = os.getenv("SUBSTRATE_URL", "ws://127.0.0.1:9944")
    SUBSTRATE_PALLET: str = os.getenv("SUBSTRATE_PALLET", "Social")

    IPFS_NODE_URL: str = os.getenv("IPFS_NODE_URL", "http://127.0.0.1:5001")
    OFFCHAIN_URL: str = os.getenv("OFFCHAIN_URL", "http://127.0.0.1:3001")

    USE_OFFCHAIN: bool = _env_flag("USE_OFFCHAIN")
    OFFCHAIN_HTTP_METHOD: str = os.getenv("OFFCHAIN_HTTP_METHOD", "post").lower()

    IPFS_TIMEOUT: int = int(os.getenv("IPFS_TIMEOUT", "30"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def use_server(cls) -> Optional[UseServer]:
        if not cls.USE_OFFCHAIN:
            return None
        return UseServer(http_request_method=cls.OFFCHAIN_HTTP_METHOD)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
