"""Logging handlers that dispatch records to per-module files.

The handlers write synchronously. From async code this blocks the event loop
for a few microseconds per record, which the MCP server tolerates.
"""

import logging
from pathlib import Path
from typing import TextIO

from core.logging.run_manager import module_to_log_name, should_rotate


def _rotate_log_file(log_dir: Path, log_name: str, stream: TextIO | None) -> TextIO:
    """Move <name>.log to <name>.previous.log and reopen <name>.log.

    Args:
        log_dir: Directory containing log files
        log_name: Base name of the log file (without .log extension)
        stream: Currently open stream for the file, closed before renaming

    Returns:
        Fresh append-mode handle for <name>.log
    """
    current = log_dir / f"{log_name}.log"
    previous = log_dir / f"{log_name}.previous.log"

    if stream:
        stream.close()

    if previous.exists():
        previous.unlink()
    if current.exists():
        current.rename(previous)

    return current.open("a", encoding="utf-8")


class ModuleDispatchHandler(logging.Handler):
    """Route records to ``<log_dir>/<module log name>.log``.

    One handler with an internal file cache instead of a FileHandler per
    module, so the number of open handles stays at one per log name.
    Files are opened lazily on first write.

    Usage:
        handler = ModuleDispatchHandler(Path("logs"))
        handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        logging.getLogger().addHandler(handler)
    """

    def __init__(self, log_dir: Path):
        super().__init__()
        self.log_dir = log_dir
        self._file_cache: dict[str, TextIO] = {}

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_name = module_to_log_name(record.name)

            if should_rotate(log_name):
                existing = self._file_cache.pop(log_name, None)
                self._file_cache[log_name] = _rotate_log_file(
                    self.log_dir, log_name, existing
                )

            stream = self._get_or_open_file(log_name)
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)

    def _get_or_open_file(self, log_name: str) -> TextIO:
        if log_name not in self._file_cache:
            path = self.log_dir / f"{log_name}.log"
            self._file_cache[log_name] = path.open("a", encoding="utf-8")
        return self._file_cache[log_name]

    def close(self) -> None:
        """Close every cached file handle."""
        self.acquire()
        try:
            while self._file_cache:
                _, stream = self._file_cache.popitem()
                stream.close()
        finally:
            self.release()
        super().close()


class ThirdPartyHandler(logging.FileHandler):
    """Single run-3p.log for third-party libraries, rotated per run."""

    LOG_NAME = "run-3p"

    def __init__(self, log_dir: Path, **kwargs):
        self.log_dir = log_dir
        log_file = log_dir / f"{self.LOG_NAME}.log"
        super().__init__(log_file, mode="a", encoding="utf-8", delay=True, **kwargs)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if should_rotate(self.LOG_NAME):
                self.stream = _rotate_log_file(self.log_dir, self.LOG_NAME, self.stream)
            super().emit(record)
        except Exception:
            self.handleError(record)
