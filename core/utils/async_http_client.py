"""Shutdown registry for lazily created async HTTP clients."""

import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

_cleanup_registry: list[tuple[str, Callable[[], Awaitable[None]]]] = []


def register_cleanup(name: str, closer: Callable[[], Awaitable[None]]) -> None:
    """Register a coroutine function to be awaited on shutdown."""
    _cleanup_registry.append((name, closer))


async def cleanup_all_clients() -> None:
    """Close all registered clients. A failing closer does not stop the rest."""
    for name, closer in _cleanup_registry:
        try:
            await closer()
        except Exception as e:
            logger.warning(f"Error closing {name} client: {e}")
    _cleanup_registry.clear()
