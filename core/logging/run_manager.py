"""Run-based log rotation manager.

A "run" is a logical unit of work (one server session or one test module).
The first record written to a module's log file within a run rotates that
file, so each log holds exactly the current run and `.previous.log` holds
the one before it.

Usage:
    from core.logging import start_run, end_run

    start_run("server-1234")
    try:
        # ... do work ...
    finally:
        end_run()
"""

from contextvars import ContextVar

# ContextVars so concurrent async runs don't see each other's rotation state
_current_run_id: ContextVar[str | None] = ContextVar("current_run_id", default=None)
_rotated_this_run: ContextVar[set[str] | None] = ContextVar("rotated_this_run", default=None)

# Module name -> log name, filled lazily
_module_log_cache: dict[str, str] = {}

# Module path prefixes -> log file names (longest prefix wins).
# Unmapped modules go to "misc.log".
MODULE_TO_LOG = {
    # Engines
    "workflows.content_analysis": "analysis",
    "workflows.prompt_synthesis": "prompts",
    "workflows.webpage_fill": "webpage-fill",
    "workflows.shared": "workflows-shared",
    # Tool façade
    "mcp_server.tools": "mcp-tools",
    "mcp_server": "mcp-server",
    # Core modules
    "core.images": "images",
    "core.utils": "utils",
    "core.config": "config",
    "core.logging": "logging-internal",
    # Tests
    "testing": "testing",
}

_SORTED_PREFIXES = sorted(MODULE_TO_LOG.keys(), key=len, reverse=True)


def start_run(run_id: str) -> None:
    """Signal start of a new run.

    Subsequent calls reset the rotation tracking.

    Args:
        run_id: Identifier for this run (e.g., server session, test module)
    """
    _current_run_id.set(run_id)
    _rotated_this_run.set(set())


def end_run() -> None:
    """Signal end of run.

    Best-effort; rotation is driven by start_run(), so a missed end_run()
    does not affect correctness.
    """
    _current_run_id.set(None)
    _rotated_this_run.set(None)


def get_current_run_id() -> str | None:
    """Get the current run ID, if any."""
    return _current_run_id.get()


def should_rotate(log_name: str) -> bool:
    """Check (and record) whether this log file still needs rotating this run.

    Args:
        log_name: The log file name (without .log extension)

    Returns:
        True exactly once per log name per run, False outside a run
    """
    run_id = _current_run_id.get()
    rotated = _rotated_this_run.get()

    if run_id is None or rotated is None:
        return False

    if log_name in rotated:
        return False

    rotated.add(log_name)
    return True


def module_to_log_name(module_name: str) -> str:
    """Resolve a logger name to its log file name.

    Args:
        module_name: The __name__ of the module (e.g., "core.images.service")

    Returns:
        Log file name without extension (e.g., "images")
    """
    if module_name not in _module_log_cache:
        _module_log_cache[module_name] = _compute_log_name(module_name)
    return _module_log_cache[module_name]


def _compute_log_name(module_name: str) -> str:
    for prefix in _SORTED_PREFIXES:
        if module_name.startswith(prefix):
            return MODULE_TO_LOG[prefix]
    return "misc"
