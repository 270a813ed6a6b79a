"""Shared helpers for the analysis and fill workflows."""

from .async_utils import run_with_concurrency
from .text_utils import truncate_text

__all__ = [
    "run_with_concurrency",
    "truncate_text",
]
