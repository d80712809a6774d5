"""Tests for core/logging.py module."""

from __future__ import annotations

import json
import logging
from pathlib import Path


from guardgen.config.models import LoggingConfig, LogOutputConfig
from guardgen.core.logging import configure_logging, get_log_file_path, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_simple_level(self) -> None:
        configure_logging(level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self) -> None:
        config = LoggingConfig.model_construct(level="LOUD", outputs=[LogOutputConfig()])
        configure_logging(config=config)
        assert logging.getLogger().level == logging.INFO

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(level="INFO")
        configure_logging(level="INFO")
        assert len(logging.getLogger().handlers) == 1

    def test_json_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "guardgen.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )
        configure_logging(config=config)
        assert get_log_file_path() == log_file

        get_logger("test").info("hello", target_class="Camera")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "hello"
        assert record["target_class"] == "Camera"
        assert record["logger"] == "test"
        assert record["level"] == "info"

    def test_per_output_level(self, tmp_path: Path) -> None:
        log_file = tmp_path / "warn.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file), level="WARNING")],
        )
        configure_logging(config=config)

        log = get_logger("test")
        log.info("quiet")
        log.warning("loud")
        for handler in logging.getLogger().handlers:
            handler.flush()

        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["loud"]

    def test_console_output_has_no_log_file(self) -> None:
        configure_logging(level="INFO")
        assert get_log_file_path() is None
