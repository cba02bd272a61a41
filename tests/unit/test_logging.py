"""Unit tests for mailerlite_cli.core.logging."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from mailerlite_cli.core import logging as ml_logging
from mailerlite_cli.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    configure_logging()
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_file_gets_json_lines(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "dashboard.log"
        configure_logging("INFO", log_file)
        structlog.get_logger().info("fetch_completed", view="Groups", count=4)

        line = log_file.read_text().strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "fetch_completed"
        assert event["count"] == 4
        assert event["level"] == "info"

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "dashboard.log"
        configure_logging("WARNING", log_file)
        structlog.get_logger().info("quiet")
        structlog.get_logger().warning("loud")
        text = log_file.read_text()
        assert "quiet" not in text
        assert "loud" in text

    def test_reconfigure_closes_previous_file(self, tmp_path: Path) -> None:
        configure_logging("INFO", tmp_path / "first.log")
        first = ml_logging._log_stream
        assert first is not None

        configure_logging("INFO", tmp_path / "second.log")
        assert first.closed
        assert ml_logging._log_stream is not None
        assert not ml_logging._log_stream.closed

        structlog.get_logger().info("after_switch")
        assert "after_switch" in (tmp_path / "second.log").read_text()
        assert "after_switch" not in (tmp_path / "first.log").read_text()

    def test_switch_to_stderr_closes_file(self, tmp_path: Path) -> None:
        configure_logging("INFO", tmp_path / "dashboard.log")
        stream = ml_logging._log_stream
        assert stream is not None
        configure_logging()
        assert stream.closed
        assert ml_logging._log_stream is None
