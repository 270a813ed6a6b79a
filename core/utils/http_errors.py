"""HTTP error handling utilities."""

import logging
from typing import Any, Type

import httpx

logger = logging.getLogger(__name__)


def response_error_detail(response: httpx.Response) -> str:
    """Best human-readable reason for a failed response.

    Prefers a ``message`` field from a JSON body, then the reason phrase,
    then the raw body text.
    """
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason_phrase or response.text


async def safe_http_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    status_error: Type[Exception],
    connection_error: Type[Exception],
    **kwargs: Any,
) -> httpx.Response:
    """
    Make HTTP request with consistent error translation.

    Args:
        client: httpx.AsyncClient instance
        method: HTTP method (GET, POST, etc.)
        url: Absolute URL or path relative to the client's base URL
        status_error: Raised for non-2xx responses; called with the message
            and a ``status_code`` keyword
        connection_error: Raised when no response was received
            (connection refused, DNS failure, timeout)
        **kwargs: Additional arguments for the request

    Returns:
        Response object with a 2xx status

    Raises:
        status_error: On HTTP error status
        connection_error: On transport errors
    """
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
        return response
    except httpx.TimeoutException as e:
        logger.error(f"Request timeout for {url}: {e}")
        raise connection_error(f"Request timeout: {e}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        detail = response_error_detail(e.response)
        logger.error(f"HTTP {status} error for {url}: {detail}")
        raise status_error(
            f"API request failed (status {status}): {detail}",
            status_code=status,
        ) from e
    except httpx.TransportError as e:
        logger.error(f"Connection failed to {url}: {e}")
        raise connection_error(f"Connection failed: {e}") from e
