"""Module-based logging with run-based rotation.

Each first-party package writes to its own file under the log directory
(``AIPIC_LOG_DIR``, default ``logs/``); third-party libraries share
``run-3p.log``. Files rotate to ``*.previous.log`` at run boundaries.

Usage:
    from core.config import configure_logging
    from core.logging import start_run, end_run

    configure_logging("mcp_server")
    start_run("server-1234")
    try:
        ...
    finally:
        end_run()

Modules keep the usual pattern:
    logger = logging.getLogger(__name__)
"""

from core.logging.handlers import ModuleDispatchHandler, ThirdPartyHandler
from core.logging.run_manager import (
    MODULE_TO_LOG,
    end_run,
    get_current_run_id,
    module_to_log_name,
    start_run,
)

__all__ = [
    "start_run",
    "end_run",
    "get_current_run_id",
    "module_to_log_name",
    "ModuleDispatchHandler",
    "ThirdPartyHandler",
    "MODULE_TO_LOG",
]
