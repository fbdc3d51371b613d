"""
Tests for the process entry point and logging setup.
"""

import logging
import sys

from contextlib import contextmanager

import pytest

from tempconv import main as main_module
from tempconv.config import AppConfig, Settings
from tempconv.log import init_logging
from logging.handlers import TimedRotatingFileHandler


@contextmanager
def bare_root_logger():
    """Root logger without handlers for the duration of the block, restored afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers, root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestInitLogging:
    def test_console_only(self, tmp_path) -> None:
        with bare_root_logger() as root:
            init_logging(logging.INFO, log_dir=str(tmp_path / "logs"))
            assert len(root.handlers) == 1
            assert root.level == logging.INFO
        assert not (tmp_path / "logs").exists()

    def test_with_file(self, tmp_path) -> None:
        log_dir = tmp_path / "logs"
        with bare_root_logger() as root:
            init_logging(logging.DEBUG, to_file=True, log_dir=str(log_dir))
            assert any(isinstance(h, TimedRotatingFileHandler) for h in root.handlers)
        assert len(list(log_dir.glob("app-*.log"))) == 1

    def test_called_twice(self) -> None:
        with bare_root_logger() as root:
            init_logging()
            init_logging()
            assert len(root.handlers) == 1


class TestMain:
    def test_runs_conversion(self, monkeypatch, tmp_path, capsys) -> None:
        config = AppConfig(tmp_path / "settings.json")
        config[Settings.LOG_LEVEL] = "ERROR"
        config.save_to_file()
        calls = []
        monkeypatch.setattr(main_module, "CONFIG", AppConfig(tmp_path / "settings.json"))
        monkeypatch.setattr(main_module, "init_logging", lambda *args: calls.append(args))
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        monkeypatch.setattr(sys, "argv", ["tempconv", "100", "C", "F"])

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 0
        assert calls == [(logging.ERROR, False)]
        assert sys.excepthook is main_module.uncaught_global_exception_handler
        assert "100°C = 212°F" in capsys.readouterr().out

    def test_settings_entry_without_value(self, monkeypatch, tmp_path, capsys) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"LOG_LEVEL": {}, "LOG_TO_FILE": {}}', encoding="utf-8")
        calls = []
        monkeypatch.setattr(main_module, "CONFIG", AppConfig(path))
        monkeypatch.setattr(main_module, "init_logging", lambda *args: calls.append(args))
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        monkeypatch.setattr(sys, "argv", ["tempconv", "100", "C", "F"])

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 0
        assert calls == [(logging.WARNING, False)]
        assert "100°C = 212°F" in capsys.readouterr().out

    def test_excepthook_logs(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            main_module.uncaught_global_exception_handler(*sys.exc_info())
        assert "Uncaught exception" in caplog.text
