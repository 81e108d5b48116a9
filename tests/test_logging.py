"""Tests for setup_logging: output stays off stdout (the MCP stdio channel)."""

from __future__ import annotations

import json

import structlog

from glide_mcp.infra.logging import setup_logging


def _reset() -> None:
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_logs_go_to_stderr(self, capsys) -> None:
        setup_logging(json_output=True, log_level="INFO")
        try:
            structlog.get_logger().info("tool_call", tool_name="get_app")
        finally:
            _reset()

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "tool_call"
        assert record["tool_name"] == "get_app"
        assert record["level"] == "info"

    def test_level_filtering(self, capsys) -> None:
        setup_logging(json_output=True, log_level="WARNING")
        try:
            structlog.get_logger().info("hidden")
            structlog.get_logger().warning("shown")
        finally:
            _reset()

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_unknown_level_falls_back_to_info(self, capsys) -> None:
        setup_logging(json_output=False, log_level="NOPE")
        try:
            structlog.get_logger().debug("hidden")
            structlog.get_logger().info("shown")
        finally:
            _reset()

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err
