"""AIPIC configuration and environment setup.

This module provides centralized configuration for the AIPIC server,
including development mode detection and log handler setup.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Top-level packages whose loggers are routed to per-module files
_FIRST_PARTY_PREFIXES = ("core", "workflows", "mcp_server", "testing")


def is_dev_mode() -> bool:
    """Check if running in development mode.

    Returns:
        True if AIPIC_MODE is set to 'dev', False otherwise.
    """
    return os.getenv("AIPIC_MODE", "prod").lower() == "dev"


def get_log_dir() -> Path:
    """Resolve (and create) the directory for module log files."""
    log_dir = Path(os.getenv("AIPIC_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


class _FirstPartyFilter(logging.Filter):
    def __init__(self, first_party: bool):
        super().__init__()
        self.first_party = first_party

    def filter(self, record: logging.LogRecord) -> bool:
        is_ours = record.name.split(".", 1)[0] in _FIRST_PARTY_PREFIXES
        return is_ours == self.first_party


def configure_logging(name: str, level: int | None = None) -> logging.Logger:
    """Configure console and module-based file logging.

    Console output goes to stderr because stdout carries the MCP stream.
    First-party records are dispatched to per-module files, everything else
    lands in run-3p.log. Safe to call more than once.

    Args:
        name: Name of the calling entry point (used for the returned logger)
        level: Log level override (default: DEBUG in dev mode, INFO otherwise)

    Returns:
        Logger for the entry point
    """
    from core.logging import ModuleDispatchHandler, ThirdPartyHandler

    if level is None:
        level = logging.DEBUG if is_dev_mode() else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if not getattr(root, "_aipic_configured", False):
        formatter = logging.Formatter(LOG_FORMAT)
        log_dir = get_log_dir()

        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)

        module_handler = ModuleDispatchHandler(log_dir)
        module_handler.setFormatter(formatter)
        module_handler.addFilter(_FirstPartyFilter(first_party=True))

        third_party = ThirdPartyHandler(log_dir)
        third_party.setFormatter(formatter)
        third_party.addFilter(_FirstPartyFilter(first_party=False))

        for handler in (console, module_handler, third_party):
            root.addHandler(handler)
        root._aipic_configured = True

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(name)
