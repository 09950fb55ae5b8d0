"""Soroswap API client with circuit breaker protection and session management."""

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import aiohttp
import structlog

from ..config.settings import NodeConfig
from ..exceptions import CircuitOpenError, SoroswapApiError
from ..models.enums import AssetListName, ContractName, Network, Protocol, TradeType
from ..models.schemas import CircuitBreakerConfig, Credential, RetryConfig
from ..utils.circuit_breaker import CircuitBreaker
from ..utils.retry import RetryHandler

logger = structlog.get_logger(__name__)

QueryParams = Sequence[Tuple[str, str]]


def _to_wire(value: Any) -> Any:
    """Make request bodies JSON-safe: integers as decimal strings, enums by value."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (TradeType, Protocol, ContractName, AssetListName)):
        return value.value
    if isinstance(value, Network):
        return value.wire_value
    if isinstance(value, Mapping):
        return {k: _to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire(v) for v in value]
    return value


class SoroswapClient:
    """Async client for the Soroswap REST API.

    Read-only (GET) requests are retried on network errors, rate limits and
    server errors. Requests that create or submit transactions are sent once.
    """

    def __init__(self, credential: Credential, config: Optional[NodeConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.credential = credential
        self.config = config or NodeConfig()
        self.session = session
        self._owns_session = session is None

        self.breaker = CircuitBreaker(CircuitBreakerConfig(
            failure_threshold=self.config.circuit_breaker_failure_threshold,
            recovery_timeout=self.config.circuit_breaker_recovery_timeout,
            half_open_max_calls=self.config.circuit_breaker_half_open_max_calls,
        ))
        self.retry_handler = RetryHandler(RetryConfig(
            max_attempts=self.config.retry_max_attempts,
            base_delay=self.config.retry_base_delay,
            max_delay=self.config.retry_max_delay,
            exponential_base=self.config.retry_exponential_base,
        ))

    async def initialize(self):
        """Open the HTTP session if one was not supplied."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
                headers=self.auth_headers,
            )
            self._owns_session = True
            logger.debug("HTTP session initialized", base_url=self.credential.base_url)

    async def close(self):
        """Close the HTTP session if this client opened it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HTTP session closed")

    async def __aenter__(self) -> "SoroswapClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.credential.api_key}"}

    def _url(self, path: str) -> str:
        return f"{self.credential.base_url.rstrip('/')}{path}"

    async def _request(self, method: str, path: str, *, params: Optional[QueryParams] = None,
                       json: Any = None) -> Any:
        if self.session is None:
            await self.initialize()
        if not self.breaker.can_execute():
            raise CircuitOpenError()

        logger.debug("Soroswap API request", method=method, path=path)
        try:
            async with self.session.request(
                method,
                self._url(path),
                params=params,
                json=_to_wire(json) if json is not None else None,
                headers=self.auth_headers,
            ) as response:
                if 200 <= response.status < 300:
                    data = await response.json(content_type=None)
                    self.breaker.record_success()
                    return data

                message = await self._error_message(response)
                if response.status >= 500 or response.status == 429:
                    self.breaker.record_failure()
                else:
                    # 4xx: the API is up, only this request was rejected
                    self.breaker.record_success()
                logger.warning("Soroswap API rejected request", method=method, path=path,
                               status=response.status, error=message)
                raise SoroswapApiError(message, status=response.status)

        except aiohttp.ClientError as e:
            self.breaker.record_failure()
            logger.error("Soroswap API unreachable", method=method, path=path,
                         error_type=type(e).__name__, error=str(e))
            raise SoroswapApiError(f"Network error: {e}") from e
        except asyncio.TimeoutError as e:
            self.breaker.record_failure()
            logger.error("Soroswap API request timed out", method=method, path=path,
                         timeout=self.config.request_timeout)
            raise SoroswapApiError(f"Request timed out after {self.config.request_timeout}s") from e

    @staticmethod
    async def _error_message(response) -> str:
        try:
            body = await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            body = None
        if isinstance(body, dict):
            for key in ("message", "detail", "error"):
                if body.get(key):
                    detail = body[key]
                    if isinstance(detail, list):
                        detail = "; ".join(str(d) for d in detail)
                    return f"{response.status}: {detail}"
        return f"{response.status}: {response.reason or 'Request failed'}"

    async def _get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        return await self.retry_handler.execute_with_retry(
            self._request, f"GET {path}", "GET", path, params=params
        )

    async def _post(self, path: str, body: Any, params: Optional[QueryParams] = None) -> Any:
        return await self._request("POST", path, params=params, json=body)

    @staticmethod
    def _network_query(network: Network, *extra: Tuple[str, str]) -> List[Tuple[str, str]]:
        return [("network", network.wire_value), *extra]

    # Remote capability surface, one coroutine per node operation

    async def get_protocols(self, network: Network) -> Any:
        return await self._get("/protocols", self._network_query(network))

    async def quote(self, request: Dict[str, Any], network: Network) -> Any:
        return await self._post("/quote", request, self._network_query(network))

    async def build(self, request: Dict[str, Any], network: Network) -> Any:
        return await self._post("/quote/build", request, self._network_query(network))

    async def send(self, xdr: str, launchtube: bool, network: Network) -> Any:
        return await self._post("/send", {"xdr": xdr, "launchtube": launchtube},
                                self._network_query(network))

    async def get_pools(self, network: Network, protocols: Sequence[str]) -> Any:
        query = self._network_query(network, *(("protocol", p) for p in protocols))
        return await self._get("/pools", query)

    async def get_pool_by_tokens(self, asset_a: str, asset_b: str, network: Network,
                                 protocols: Sequence[str]) -> Any:
        query = self._network_query(network, *(("protocol", p) for p in protocols))
        return await self._get(f"/pools/{asset_a}/{asset_b}", query)

    async def add_liquidity(self, request: Dict[str, Any], network: Network) -> Any:
        return await self._post("/liquidity/add", request, self._network_query(network))

    async def remove_liquidity(self, request: Dict[str, Any], network: Network) -> Any:
        return await self._post("/liquidity/remove", request, self._network_query(network))

    async def get_user_positions(self, address: str, network: Network) -> Any:
        return await self._get(f"/liquidity/positions/{address}", self._network_query(network))

    async def get_asset_list(self, name: Optional[AssetListName] = None) -> Any:
        if name is None:
            return await self._get("/asset-list")
        return await self._get("/asset-list", [("name", name.value)])

    async def get_price(self, assets: Union[str, Sequence[str]], network: Network) -> Any:
        if isinstance(assets, str):
            assets = [assets]
        query = self._network_query(network, *(("asset", a) for a in assets))
        return await self._get("/price", query)

    async def get_contract_address(self, network: Network, contract_name: ContractName) -> Any:
        return await self._get(f"/api/{network.wire_value}/{contract_name.value}")

    def get_circuit_breaker_status(self) -> Dict[str, Any]:
        return self.breaker.get_state_info()
