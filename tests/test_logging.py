"""Tests for logging setup."""
from __future__ import annotations

import io
import json

import pytest
import structlog
from rich.console import Console

from license_finder.logging import (
    RichConsoleRenderer,
    drop_style_processor,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestRichConsoleRenderer:
    """Tests for RichConsoleRenderer."""

    def test_prints_event_and_fields(self) -> None:
        """Test that the event and key/value pairs are printed."""
        output = io.StringIO()
        renderer = RichConsoleRenderer(Console(file=output, width=200))

        with pytest.raises(structlog.DropEvent):
            renderer(
                None,
                "info",
                {
                    "event": "Running command",
                    "level": "info",
                    "logger": "runner",
                    "command": "mvn -v",
                    "_style": "dim",
                },
            )

        text = output.getvalue()
        assert "Running command" in text
        assert "runner" in text
        assert "command='mvn -v'" in text
        assert "_style" not in text


def test_drop_style_processor() -> None:
    """Test that the style hint is removed."""
    assert drop_style_processor(None, "info", {"event": "x", "_style": "dim"}) == {
        "event": "x"
    }


def test_production_logs_json(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that production mode renders JSON lines."""
    monkeypatch.setenv("LICENSE_FINDER_ENV", "production")
    setup_logging("INFO")

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    rendered = processors[-1](None, "info", {"event": "done", "count": 2})
    assert json.loads(rendered) == {"event": "done", "count": 2}


def test_development_logs_to_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that development mode renders through Rich."""
    monkeypatch.delenv("LICENSE_FINDER_ENV", raising=False)
    setup_logging("DEBUG")

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], RichConsoleRenderer)
