# tests/unit/infrastructure/logging/test_setup.py

"""Tests for logging setup, run summaries and progress display"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import NullHandler
from logging import StreamHandler
from logging import WARNING
from logging import getLogger

# Local imports
from jsonmend.infrastructure.logging import FileProgress
from jsonmend.infrastructure.logging import log_run_summary
from jsonmend.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test setup_logging()"""

    def test_console_only(self):
        result = setup_logging(log_level="INFO")

        root_logger = getLogger()
        assert result is None
        assert root_logger.level == INFO
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], StreamHandler)

    def test_silent_without_file(self, capsys):
        """Silent mode with no log file writes nothing anywhere"""
        assert setup_logging(silent=True) is None

        (handler,) = getLogger().handlers
        assert isinstance(handler, NullHandler)

        getLogger("jsonmend.test").warning("unseen")
        assert capsys.readouterr().err == ""

    def test_file_logging(self, tmp_path):
        log_file = str(tmp_path / "logs" / "run.log")
        result = setup_logging(log_file=log_file, log_level="WARNING")

        root_logger = getLogger()
        assert result == log_file
        assert root_logger.level == DEBUG
        file_handlers = [h for h in root_logger.handlers if isinstance(h, FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == DEBUG

        getLogger("jsonmend.test").debug("debug line")
        for handler in root_logger.handlers:
            handler.flush()
        content = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
        assert "debug line" in content

    def test_replaces_existing_handlers(self):
        setup_logging()
        setup_logging()
        assert len(getLogger().handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="LOUD")
        assert getLogger().level == INFO

    def test_default_level_is_warning(self):
        setup_logging()
        assert getLogger().level == WARNING


class TestLogRunSummary:
    """Test log_run_summary()"""

    def test_summary_contents(self, caplog):
        caplog.set_level(INFO)
        log_run_summary(
            start_time=0.0,
            end_time=75.5,
            total_files=4,
            valid_files=2,
            repaired_files=1,
            failed_files=1,
            log_file="run.log",
        )

        assert "REPAIR COMPLETE" in caplog.text
        assert "Files processed: 4" in caplog.text
        assert "Processing time: 1m 15.5s" in caplog.text
        assert "Already valid: 2 (50.0%)" in caplog.text
        assert "Repaired: 1 (25.0%)" in caplog.text
        assert "Failed: 1 (25.0%)" in caplog.text
        assert "Log: run.log" in caplog.text

    def test_zero_files(self, caplog):
        caplog.set_level(INFO)
        log_run_summary(0.0, 1.0, 0, 0, 0, 0)

        assert "Files processed: 0" in caplog.text
        assert "Already valid" not in caplog.text


class TestFileProgress:
    """Test FileProgress"""

    def test_disabled_counts_and_logs(self, caplog):
        caplog.set_level(DEBUG)
        with FileProgress(2, enabled=False) as progress:
            progress.advance("a.json")
            progress.advance("b.json")

        assert progress.completed == 2
        assert progress.progress is None
        assert "[2/2] b.json" in caplog.text

    def test_enabled(self):
        with FileProgress(3, "Repairing", enabled=True) as progress:
            assert progress.task_id is not None
            progress.advance("a.json")

        assert progress.completed == 1
        task = progress.progress.tasks[0]
        assert task.completed == 1
        assert task.total == 3
