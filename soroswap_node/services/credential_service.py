"""Credential resolution and verification for node runs."""

from typing import Optional
from urllib.parse import urlparse

import structlog

from ..config.settings import NodeConfig
from ..exceptions import CredentialError, SoroswapApiError
from ..models.enums import Network
from ..models.schemas import Credential

logger = structlog.get_logger(__name__)

API_KEY_PREFIX = "sk_"


def resolve_credential(config: NodeConfig, api_key: Optional[str] = None,
                       base_url: Optional[str] = None) -> Credential:
    """
    Resolve the run-scoped credential.

    Explicit arguments take precedence over the configuration.

    Raises:
        CredentialError: If the key is missing or the base URL is not an http(s) URL
    """
    api_key = (api_key if api_key is not None else config.api_key or "").strip()
    base_url = (base_url if base_url is not None else config.base_url or "").strip()

    if not api_key:
        raise CredentialError("Soroswap API key is missing")
    if any(ch.isspace() for ch in api_key):
        raise CredentialError("Soroswap API key must not contain whitespace")
    if not api_key.startswith(API_KEY_PREFIX):
        logger.warning("Soroswap API key does not start with the expected prefix", prefix=API_KEY_PREFIX)

    if not base_url:
        raise CredentialError("Soroswap base URL is missing")
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise CredentialError(f"Soroswap base URL is malformed: {base_url!r}")

    return Credential(api_key=api_key, base_url=base_url.rstrip("/"))


class CredentialService:
    """Checks that a credential is accepted by the Soroswap API."""

    def __init__(self, client):
        self.client = client

    async def verify(self, network: Network = Network.MAINNET) -> bool:
        """Issue the protocol listing request used as the credential test."""
        try:
            await self.client.get_protocols(network)
        except SoroswapApiError as e:
            logger.warning("Credential test failed", status=e.status, error=e.message)
            return False
        logger.info("Credential test passed", base_url=self.client.credential.base_url)
        return True
