"""Core utilities for async HTTP clients and error handling."""

from .async_context import AsyncContextManager
from .async_http_client import cleanup_all_clients, register_cleanup
from .http_errors import response_error_detail, safe_http_request

__all__ = [
    "AsyncContextManager",
    "cleanup_all_clients",
    "register_cleanup",
    "response_error_detail",
    "safe_http_request",
]
