import logging
import pytest
import sys
import os

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from logging.handlers import RotatingFileHandler

from photokml.constants import TRACE
from photokml.logging_config import get_level, setup_logging
import photokml.logging_config as logging_config


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    while logging_config._installed_handlers:
        handler = logging_config._installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


class TestGetLevel:
    def test_known_levels(self):
        assert get_level("error") == logging.ERROR
        assert get_level("Warning") == logging.WARNING
        assert get_level("INFO") == logging.INFO
        assert get_level("debug") == logging.DEBUG
        assert get_level("trace") == TRACE
        assert get_level("off") > logging.CRITICAL

    def test_trace_has_a_name(self):
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            get_level("verbose")


class TestSetupLogging:
    def test_console_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"

        root = setup_logging("warning", "debug", log_file)

        handlers = logging_config._installed_handlers
        assert len(handlers) == 2
        file_handler = next(h for h in handlers if isinstance(h, RotatingFileHandler))
        assert file_handler.level == logging.DEBUG
        console = next(h for h in handlers if not isinstance(h, RotatingFileHandler))
        assert console.level == logging.WARNING
        assert root.level == logging.DEBUG
        assert log_file.parent.exists()

    def test_messages_reach_the_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("off", "debug", log_file)

        logging.getLogger("photokml.test").debug("hello from the test")
        for handler in logging_config._installed_handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging("info", "debug", tmp_path / "a.log")
        setup_logging("info", "debug", tmp_path / "b.log")

        assert len(logging_config._installed_handlers) == 2
        root = logging.getLogger()
        assert sum(isinstance(h, RotatingFileHandler) for h in root.handlers) == 1

    def test_unusable_log_folder_keeps_console(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        setup_logging("info", "debug", blocker / "run.log")

        assert len(logging_config._installed_handlers) == 1
        assert not isinstance(logging_config._installed_handlers[0], RotatingFileHandler)
