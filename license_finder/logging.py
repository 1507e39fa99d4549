"""Structured logging setup for license-finder."""

import logging
import os
import sys
from typing import Any, Optional

import structlog
from rich.console import Console
from rich.markup import escape

# Set LICENSE_FINDER_ENV=production for JSON log lines
ENV_VARIABLE = "LICENSE_FINDER_ENV"


class RichConsoleRenderer:
    """Render structlog events as key=value lines on a Rich console.

    Events may carry a ``_style`` key with a Rich style applied to the whole
    line; it is never printed as a key/value pair.
    """

    LEVEL_STYLES = {
        "debug": "dim",
        "info": "green",
        "warning": "yellow",
        "error": "bold red",
        "critical": "bold magenta",
    }

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the renderer.

        Args:
            console: Console to print to. Defaults to a stderr console so log
                lines never mix with report output on stdout.
        """
        self._console = console if console is not None else Console(stderr=True)

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> str:
        custom_style = event_dict.pop("_style", None)

        event = event_dict.pop("event", "")
        log_level = event_dict.pop("level", "info")
        logger_name = event_dict.pop("logger", None)
        timestamp = event_dict.pop("timestamp", "")
        exception = event_dict.pop("exception", None)

        parts: list[str] = []
        if timestamp:
            parts.append(f"[dim]{timestamp}[/dim]")
        if logger_name:
            parts.append(f"[bold]{logger_name}[/bold]")

        level_style = self.LEVEL_STYLES.get(log_level, "white")
        parts.append(f"[{level_style}]{log_level:<8}[/{level_style}]")
        parts.append(escape(str(event)))

        for key, value in event_dict.items():
            parts.append(f"[cyan]{key}[/cyan]=[green]{escape(repr(value))}[/green]")

        line = " ".join(parts)
        if exception:
            line += f"\n[red]{escape(str(exception))}[/red]"

        self._console.print(line, style=custom_style, highlight=False)

        # Already printed; keep the stdlib handler from emitting it again
        raise structlog.DropEvent


def drop_style_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove the Rich-only ``_style`` hint before non-console rendering."""
    event_dict.pop("_style", None)
    return event_dict


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> None:
    """Configure structlog for the application.

    Args:
        level: Standard logging level name.
        console: Optional Rich console for development output.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if os.getenv(ENV_VARIABLE) == "production":
        processors = shared_processors + [
            drop_style_processor,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            RichConsoleRenderer(console),
        ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
