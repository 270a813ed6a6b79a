"""Unit tests for module-based logging system."""

import logging
import tempfile
from pathlib import Path

from core.config import get_log_dir, is_dev_mode
from core.logging import (
    MODULE_TO_LOG,
    ModuleDispatchHandler,
    ThirdPartyHandler,
    end_run,
    get_current_run_id,
    module_to_log_name,
    start_run,
)
from core.logging.run_manager import (
    _compute_log_name,
    _module_log_cache,
    should_rotate,
)


def make_record(name: str, message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestModuleToLogName:
    """Tests for module_to_log_name() function."""

    def test_exact_match(self):
        """Module names that exactly match a prefix."""
        assert module_to_log_name("core.images") == "images"
        assert module_to_log_name("mcp_server") == "mcp-server"

    def test_submodule_match(self):
        """Submodules should match their parent prefix."""
        assert module_to_log_name("core.images.service") == "images"
        assert module_to_log_name("core.utils.http_errors") == "utils"
        assert module_to_log_name("mcp_server.server") == "mcp-server"

    def test_workflow_match(self):
        """Workflow modules should match their specific log names."""
        assert module_to_log_name("workflows.content_analysis.markup") == "analysis"
        assert module_to_log_name("workflows.content_analysis.article") == "analysis"
        assert module_to_log_name("workflows.prompt_synthesis.synthesis") == "prompts"
        assert module_to_log_name("workflows.webpage_fill.pipeline") == "webpage-fill"

    def test_longest_prefix_wins(self):
        """When multiple prefixes match, the longest one wins."""
        # "mcp_server.tools" is longer than "mcp_server"
        assert module_to_log_name("mcp_server.tools.images") == "mcp-tools"
        assert module_to_log_name("workflows.shared.async_utils") == "workflows-shared"

    def test_fallback_to_misc(self):
        """Unmapped modules should fall back to 'misc'."""
        assert module_to_log_name("unknown.module") == "misc"
        assert module_to_log_name("some.random.path") == "misc"
        assert module_to_log_name("__main__") == "misc"

    def test_caching(self):
        """Results should be cached for performance."""
        _module_log_cache.clear()

        result1 = module_to_log_name("core.images.test_module")
        assert "core.images.test_module" in _module_log_cache

        result2 = module_to_log_name("core.images.test_module")
        assert result1 == result2


class TestComputeLogName:
    """Tests for _compute_log_name() internal function."""

    def test_all_mappings_valid(self):
        """All MODULE_TO_LOG entries should produce valid log names."""
        for prefix, log_name in MODULE_TO_LOG.items():
            result = _compute_log_name(prefix)
            assert result == log_name, f"Expected {prefix} -> {log_name}, got {result}"


class TestRunLifecycle:
    """Tests for start_run/end_run lifecycle."""

    def test_start_run_sets_id(self):
        end_run()
        assert get_current_run_id() is None

        start_run("test-run-123")
        assert get_current_run_id() == "test-run-123"

        end_run()
        assert get_current_run_id() is None

    def test_multiple_start_runs(self):
        """Starting a new run should replace the previous one."""
        start_run("run-1")
        assert get_current_run_id() == "run-1"

        start_run("run-2")
        assert get_current_run_id() == "run-2"

        end_run()


class TestShouldRotate:
    """Tests for should_rotate() function."""

    def test_no_rotation_without_run(self):
        end_run()
        assert should_rotate("test-log") is False

    def test_rotates_once_per_run(self):
        start_run("test-run")
        assert should_rotate("images") is True
        assert should_rotate("images") is False
        end_run()

    def test_different_logs_rotate_independently(self):
        start_run("test-run")
        assert should_rotate("images") is True
        assert should_rotate("mcp-tools") is True
        assert should_rotate("images") is False
        assert should_rotate("mcp-tools") is False
        end_run()

    def test_new_run_resets_rotation(self):
        start_run("run-1")
        assert should_rotate("images") is True
        end_run()

        start_run("run-2")
        assert should_rotate("images") is True
        end_run()


class TestModuleDispatchHandler:
    """Tests for ModuleDispatchHandler."""

    def test_creates_log_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ModuleDispatchHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            handler.emit(make_record("core.images.service", "Test message"))
            handler.close()

            log_file = log_dir / "images.log"
            assert log_file.exists()
            assert "Test message" in log_file.read_text()

    def test_routes_to_correct_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ModuleDispatchHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            handler.emit(make_record("workflows.content_analysis.markup", "Analysis message"))
            handler.emit(make_record("mcp_server.tools.images", "Tool message"))
            handler.close()

            assert "Analysis message" in (log_dir / "analysis.log").read_text()
            assert "Tool message" in (log_dir / "mcp-tools.log").read_text()

    def test_rotation_on_new_run(self):
        """Handler should rotate files when a new run starts."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ModuleDispatchHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            start_run("run-1")
            handler.emit(make_record("core.images", "Run 1 message"))
            end_run()

            start_run("run-2")
            handler.emit(make_record("core.images", "Run 2 message"))
            end_run()

            handler.close()

            current = log_dir / "images.log"
            previous = log_dir / "images.previous.log"

            assert "Run 2 message" in current.read_text()
            assert "Run 1 message" not in current.read_text()
            assert "Run 1 message" in previous.read_text()

    def test_close_flushes_all_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ModuleDispatchHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            for module in ["core.images", "workflows.prompt_synthesis", "mcp_server"]:
                handler.emit(make_record(module, f"Message from {module}"))

            handler.close()
            assert len(handler._file_cache) == 0


class TestThirdPartyHandler:
    """Tests for ThirdPartyHandler."""

    def test_writes_to_single_file(self):
        """All third-party logs should go to run-3p.log."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ThirdPartyHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            for lib in ["httpx", "mcp.server", "bs4"]:
                handler.emit(make_record(lib, f"Message from {lib}"))

            handler.close()

            content = (log_dir / "run-3p.log").read_text()
            assert "httpx" in content
            assert "mcp.server" in content
            assert "bs4" in content

    def test_rotation_on_new_run(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir)
            handler = ThirdPartyHandler(log_dir)
            handler.setFormatter(logging.Formatter("%(message)s"))

            start_run("run-1")
            handler.emit(make_record("httpx", "Run 1 httpx message"))
            end_run()

            start_run("run-2")
            handler.emit(make_record("httpx", "Run 2 httpx message"))
            end_run()

            handler.close()

            assert "Run 2" in (log_dir / "run-3p.log").read_text()
            assert "Run 1" in (log_dir / "run-3p.previous.log").read_text()


class TestLogConfig:
    """Tests for environment-driven logging settings."""

    def test_log_dir_from_env(self, tmp_path, monkeypatch):
        target = tmp_path / "nested" / "logs"
        monkeypatch.setenv("AIPIC_LOG_DIR", str(target))

        assert get_log_dir() == target
        assert target.is_dir()

    def test_dev_mode(self, monkeypatch):
        monkeypatch.setenv("AIPIC_MODE", "DEV")
        assert is_dev_mode() is True

        monkeypatch.delenv("AIPIC_MODE")
        assert is_dev_mode() is False
