"""Per-item dispatch of node operations."""

import asyncio
import time
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import structlog

from ..exceptions import NodeOperationError, SoroswapNodeError
from ..models.enums import Network, OperationName
from ..models.schemas import DispatchResult, Failure, Item, Success
from ..operations.parameters import enum_coercion
from .operation_service import OperationService

logger = structlog.get_logger(__name__)

DEFAULT_OPERATION = OperationName.GET_PROTOCOLS.value

_coerce_network = enum_coercion(Network)


def to_items(raw_items: Iterable[Union[Item, Mapping[str, Any]]]) -> List[Item]:
    """Wrap plain parameter mappings as items indexed by position."""
    items = []
    for position, raw in enumerate(raw_items):
        if isinstance(raw, Item):
            items.append(raw)
        elif isinstance(raw, Mapping):
            items.append(Item(index=position, parameters=raw))
        else:
            raise TypeError(f"Item {position} must be a mapping of parameters, got {type(raw).__name__}")
    return items


class DispatchService:
    """Runs one operation per item and pairs every item with one result.

    Results come back in input order. With ``continue_on_fail`` every failure
    is recorded against its item; without it the first failure aborts the
    run with ``NodeOperationError``.
    """

    def __init__(
        self,
        client,
        operation_service: Optional[OperationService] = None,
        *,
        network: Network = Network.MAINNET,
        continue_on_fail: bool = False,
        max_concurrency: int = 1,
    ):
        self.client = client
        self.operation_service = operation_service or OperationService()
        self.network = network
        self.continue_on_fail = continue_on_fail
        self.max_concurrency = max(1, max_concurrency)

        self.total_items = 0
        self.failed_items = 0

    async def dispatch(self, items: Sequence[Item]) -> List[DispatchResult]:
        """Dispatch every item and return the results in item order."""
        self.operation_service.load_operations()
        started = time.monotonic()

        if self.max_concurrency > 1 and not self.continue_on_fail:
            logger.info("Fail-fast runs are sequential, ignoring max_concurrency",
                        max_concurrency=self.max_concurrency)

        if self.max_concurrency > 1 and self.continue_on_fail:
            results = await self._dispatch_concurrently(items)
        else:
            results = []
            for item in items:
                results.append(await self._dispatch_item(item))

        logger.info(
            "Dispatch finished",
            items=len(results),
            failed=sum(1 for r in results if not r.ok),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        return results

    async def _dispatch_concurrently(self, items: Sequence[Item]) -> List[DispatchResult]:
        semaphore = asyncio.Semaphore(self.max_concurrency)
        slots: List[Optional[DispatchResult]] = [None] * len(items)

        async def run(position: int, item: Item):
            async with semaphore:
                slots[position] = await self._dispatch_item(item)

        await asyncio.gather(*(run(position, item) for position, item in enumerate(items)))
        return slots

    async def _dispatch_item(self, item: Item) -> DispatchResult:
        self.total_items += 1
        log = logger.bind(item_index=item.index)
        try:
            payload = await self._execute_item(item, log)
        except Exception as e:
            self.failed_items += 1
            message = e.message if isinstance(e, SoroswapNodeError) else str(e) or type(e).__name__
            code = e.code if isinstance(e, SoroswapNodeError) else None

            if not self.continue_on_fail:
                log.error("Item failed, aborting run", error=message, code=code)
                raise NodeOperationError(message, item.index) from e

            log.warning("Item failed", error=message, code=code)
            return Failure(item_index=item.index, error=message, code=code)

        return Success(item_index=item.index, payload=payload)

    async def _execute_item(self, item: Item, log) -> Any:
        operation = self.operation_service.get_operation(self._resolve_operation(item))
        network = self._resolve_network(item)
        params = operation.collect_parameters(item)

        log.debug("Dispatching item", operation=operation.name.value, network=network.value)
        return await operation.execute(self.client, params, network)

    @staticmethod
    def _resolve_operation(item: Item) -> Any:
        raw = item.get_parameter("operation")
        if raw is None or raw == "":
            return DEFAULT_OPERATION
        return raw

    def _resolve_network(self, item: Item) -> Network:
        raw = item.get_parameter("network")
        if raw is None or raw == "":
            return self.network
        return _coerce_network("network", raw)
