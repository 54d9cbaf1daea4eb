"""Tests for the structured logger."""
import json
import logging
from logging.handlers import RotatingFileHandler

from shared.config import GlobalConfig
from shared.logger import WordShiftLogger
from tests.conftest import FixedRandom
from wordshift.core.engine import CipherGame


class TestFileLogging:
    def test_json_lines_carry_context(self, tmp_path):
        log_file = tmp_path / "logs" / "ws.log"
        log = WordShiftLogger(
            "engine.jsontest",
            log_level="DEBUG",
            log_file=log_file,
            json_logs=True,
            console_output=False,
        )
        with log.operation("encode"):
            log.debug("Session ON", length=4)
        log.info("outside")

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[0]["message"] == "Session ON"
        assert lines[0]["level"] == "DEBUG"
        assert lines[0]["logger"] == "wordshift.engine.jsontest"
        assert lines[0]["operation"] == "encode"
        assert lines[0]["extra"] == {"length": 4}
        assert "operation" not in lines[1]

    def test_level_filters_records(self, tmp_path):
        log_file = tmp_path / "ws.log"
        log = WordShiftLogger(
            "engine.leveltest", log_file=log_file, console_output=False
        )
        log.info("hidden")
        log.warning("shown")
        text = log_file.read_text()
        assert "hidden" not in text
        assert "shown" in text

    def test_from_config(self, tmp_path):
        settings = GlobalConfig(log_level="ERROR", log_file=str(tmp_path / "c.log"))
        log = WordShiftLogger.from_config("engine.cfgtest", settings)
        assert log.underlying.level == 40
        assert log.tool_name == "engine.cfgtest"

    def test_reinstantiation_does_not_stack_handlers(self):
        WordShiftLogger("engine.dup")
        log = WordShiftLogger("engine.dup")
        assert len(log.underlying.handlers) == 1

    def test_timed_reports_elapsed(self):
        log = WordShiftLogger("engine.timed", console_output=False)
        with log.timed("work") as timer:
            pass
        assert timer.elapsed >= 0.0

    def test_reinstantiation_closes_old_file_handler(self, tmp_path):
        first = WordShiftLogger(
            "engine.reopen", log_file=tmp_path / "a.log", console_output=False
        )
        (old_handler,) = first.underlying.handlers
        WordShiftLogger("engine.reopen", console_output=False)
        assert old_handler.stream is None


class TestLoggerIsolation:
    def test_default_engine_logger_leaves_cli_logger_alone(self, tmp_path):
        log_file = tmp_path / "cli.log"
        settings = GlobalConfig(log_level="INFO", log_file=str(log_file))
        cli_log = WordShiftLogger.from_config("cli", settings)
        try:
            CipherGame(rng=FixedRandom(3))
            assert cli_log.underlying.level == logging.INFO
            assert any(
                isinstance(h, RotatingFileHandler) for h in cli_log.underlying.handlers
            )
            cli_log.info("still writing")
            assert "still writing" in log_file.read_text()
        finally:
            for handler in list(cli_log.underlying.handlers):
                handler.close()
            cli_log.underlying.handlers.clear()
