"""Entry points for running the Soroswap node."""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import structlog

from .config.settings import NodeConfig, get_config
from .exceptions import CredentialError, NodeOperationError
from .models.enums import Network
from .models.schemas import Item
from .operations.parameters import enum_coercion
from .services.credential_service import CredentialService, resolve_credential
from .services.dispatch_service import DispatchService, to_items
from .services.http_client import SoroswapClient
from .services.operation_service import OperationService
from .utils.logging import setup_logging

logger = structlog.get_logger(__name__)


async def execute(
    items: Iterable[Union[Item, Mapping[str, Any]]],
    *,
    continue_on_fail: Optional[bool] = None,
    network: Optional[Union[Network, str]] = None,
    client: Optional[SoroswapClient] = None,
    config: Optional[NodeConfig] = None,
) -> List[Dict[str, Any]]:
    """
    Run the node over a sequence of items.

    Args:
        items: Items, or plain parameter mappings indexed by position
        continue_on_fail: Record failures per item instead of aborting
            (defaults to the configuration)
        network: Network used when an item does not choose one
        client: Pre-built API client; when omitted one is created from the
            resolved credential and closed afterwards
        config: Node configuration (defaults to the environment)

    Returns:
        One output item per input item, in input order

    Raises:
        CredentialError: If credentials are missing or malformed
        NodeOperationError: On the first item failure when not continuing on failure
    """
    config = config or get_config()
    items = to_items(items)
    if continue_on_fail is None:
        continue_on_fail = config.continue_on_fail
    default_network = enum_coercion(Network)("network", network) if network else config.network

    owns_client = client is None
    if owns_client:
        # Resolved once per run, before any item is touched
        client = SoroswapClient(resolve_credential(config), config)

    dispatcher = DispatchService(
        client,
        OperationService(),
        network=default_network,
        continue_on_fail=continue_on_fail,
        max_concurrency=config.max_concurrency,
    )

    try:
        if owns_client:
            await client.initialize()
        results = await dispatcher.dispatch(items)
    finally:
        if owns_client:
            await client.close()

    return [result.to_item() for result in results]


async def verify_credentials(config: Optional[NodeConfig] = None) -> bool:
    """Run the credential test request against the configured API."""
    config = config or get_config()
    async with SoroswapClient(resolve_credential(config), config) as client:
        return await CredentialService(client).verify(config.network)


def _load_items(path: str) -> List[Any]:
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError("Input must be a JSON object or a list of objects")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Soroswap API operations over workflow items")
    parser.add_argument("input", nargs="?", default="-",
                        help="JSON file with a list of item parameter objects (default: stdin)")
    parser.add_argument("--network", choices=[n.value for n in Network],
                        help="Network for items that do not set one")
    parser.add_argument("--continue-on-fail", action="store_true", default=None,
                        help="Record failures per item instead of stopping at the first one")
    parser.add_argument("--verify-credentials", action="store_true",
                        help="Only check that the configured credentials are accepted")
    parser.add_argument("--list-operations", action="store_true",
                        help="Print the available operations and their parameters")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.list_operations:
        print(json.dumps(OperationService().get_operations_metadata(), indent=2))
        return 0

    try:
        if args.verify_credentials:
            ok = asyncio.run(verify_credentials())
            print(json.dumps({"valid": ok}))
            return 0 if ok else 1

        results = asyncio.run(execute(
            _load_items(args.input),
            continue_on_fail=args.continue_on_fail,
            network=args.network,
        ))
    except (CredentialError, NodeOperationError) as e:
        logger.error("Run failed", error=str(e))
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(results, indent=2, default=str))
    return 0
