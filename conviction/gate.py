"""HTTP client for the conviction service.

The service publishes the public configuration at its root and gates
proposal submissions behind an allow-list at ``/proposals/{address}``.
Each call opens its own short-lived client; nothing is retried.
"""

import logging

import httpx
from pydantic import ValidationError

from .config import DEFAULT_HTTP_TIMEOUT
from .errors import ConfigFetchError
from .types import PublicConfig

logger = logging.getLogger(__name__)


def join_url(base: str, *parts: str) -> str:
    """Join URL path segments without doubling or dropping slashes."""
    url = base.rstrip("/")
    for part in parts:
        part = part.strip("/")
        if part:
            url = f"{url}/{part}"
    return url


async def _http_get(url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> httpx.Response:
    """Issue a single GET request."""
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await client.get(url)


async def fetch_public_config(
    service_uri: str, timeout: float = DEFAULT_HTTP_TIMEOUT
) -> PublicConfig:
    """Fetch the public configuration from the service root.

    Raises:
        ConfigFetchError: On transport failure, non-2xx status, or a body
            that is not a valid PublicConfig.
    """
    try:
        response = await _http_get(service_uri, timeout=timeout)
        response.raise_for_status()
        return PublicConfig(**response.json())
    except httpx.HTTPError as e:
        raise ConfigFetchError(f"Failed to fetch config from {service_uri}: {e}") from e
    except (ValidationError, ValueError, TypeError) as e:
        raise ConfigFetchError(f"Invalid config served by {service_uri}: {e}") from e


async def notify_proposal(
    service_uri: str, address: str, timeout: float = DEFAULT_HTTP_TIMEOUT
) -> int:
    """Ask the gate to admit ``address``'s proposals into the global state.

    The response body is not interpreted. A non-2xx status (e.g. 401 for an
    address outside the allow-list) is logged and returned, not raised.

    Returns:
        The HTTP status code of the gate response.

    Raises:
        httpx.HTTPError: On transport failure.
    """
    url = join_url(service_uri, "proposals", address)
    response = await _http_get(url, timeout=timeout)
    if response.is_success:
        logger.debug("Gate accepted notification for %s", address)
    else:
        logger.warning(f"Gate returned HTTP {response.status_code} for {address}")
    return response.status_code
