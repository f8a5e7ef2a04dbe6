import asyncio
import json
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import Config, configure_logging
from .models.content import UseServer
from .service.cids import get_cids_of_structs
from .service.ipfs_client import IPFSClient
from .service.substrate_client import SubstrateClient

CONTENT_KINDS = ["content", "space", "post", "comment", "account"]
STRUCT_KINDS = {
    "blog": "find_blogs",
    "post": "find_posts",
    "comment": "find_comments",
    "account": "find_social_accounts",
}
CONTENT_LABELS = {
    "blog": "space",
    "post": "post",
    "comment": "comment",
    "account": "account",
}


def _ipfs_client(offchain: Optional[str]) -> IPFSClient:
    use_server = UseServer(http_request_method=offchain) if offchain else Config.use_server()
    return IPFSClient(use_server=use_server)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("--log-level", type=str, default=None, help="Logging level (defaults to LOG_LEVEL)")
def main(log_level: Optional[str]):
    configure_logging(log_level)


@main.command()
@click.argument("cids", nargs=-1, required=True)
@click.option(
    "--kind",
    type=click.Choice(CONTENT_KINDS),
    default="content",
    help="Content kind, used for logging",
)
@click.option(
    "--offchain",
    type=click.Choice(["get", "post"]),
    default=None,
    help="Load through the offchain gateway with the given HTTP method",
)
def content(cids: Tuple[str, ...], kind: str, offchain: Optional[str]):
    """Load off-chain content by CID."""

    async def run():
        client = _ipfs_client(offchain)
        await client.check_connection()
        return await client.get_content_array(list(cids), kind)

    _echo_json(asyncio.run(run()))


@main.command()
@click.argument("kind", type=click.Choice(list(STRUCT_KINDS)))
@click.argument("ids", nargs=-1, required=True)
@click.option("--url", type=str, default=None, help="Substrate node URL (defaults to SUBSTRATE_URL)")
@click.option("--with-content", is_flag=True, help="Also load the IPFS content of each struct")
def struct(kind: str, ids: Tuple[str, ...], url: Optional[str], with_content: bool):
    """Load on-chain structs by id."""

    async def run():
        substrate_client = SubstrateClient.connect(url)
        parsed_ids = [int(i) if i.isdigit() else i for i in ids]
        structs = await getattr(substrate_client, STRUCT_KINDS[kind])(parsed_ids)
        result = {"structs": [s.model_dump() for s in structs]}
        if with_content:
            result["content"] = await _ipfs_client(None).get_content_array(
                get_cids_of_structs(structs), CONTENT_LABELS[kind]
            )
        return result

    _echo_json(asyncio.run(run()))


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def save(path: Path):
    """Add a JSON document to IPFS through the offchain gateway."""
    with open(path, "r") as f:
        payload = json.load(f)

    cid = asyncio.run(_ipfs_client(None).save_content(payload))
    if cid is None:
        click.echo("ERROR: failed to save content", err=True)
        sys.exit(1)
    click.echo(cid)


@main.command("save-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def save_file(path: Path):
    """Upload a file to IPFS through the offchain gateway."""
    with open(path, "rb") as f:
        cid = asyncio.run(_ipfs_client(None).save_file(f, filename=path.name))

    if cid is None:
        click.echo("ERROR: failed to save file", err=True)
        sys.exit(1)
    click.echo(cid)


@main.command()
@click.argument("cid")
def remove(cid: str):
    """Unpin content on the offchain gateway."""
    asyncio.run(_ipfs_client(None).remove_content(cid))


if __name__ == "__main__":
    main()
