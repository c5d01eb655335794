"""Unit tests for wpfetch.utils.logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from wpfetch.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestConfigureLogging:
    def test_json_output(self, capsys) -> None:
        logger = configure_logging("INFO", json_output=True)
        logger.info("site_crawl_succeeded", target="alpha", records=6)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "site_crawl_succeeded"
        assert event["records"] == 6
        assert event["level"] == "info"

    def test_level_filtering(self, capsys) -> None:
        logger = configure_logging("WARNING", json_output=True)
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_environment_does_not_pick_the_renderer(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        configure_logging("INFO", json_output=False).info("crawl_run_completed")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert "crawl_run_completed" in line
        assert not line.lstrip().startswith("{")

    def test_http_client_request_lines_are_quieted(self) -> None:
        configure_logging("DEBUG", json_output=True)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_stdlib_records_share_the_renderer(self, capsys) -> None:
        configure_logging("INFO", json_output=True)
        logging.getLogger("wpfetch.stdlib").warning("disk nearly full")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert json.loads(line)["event"] == "disk nearly full"
