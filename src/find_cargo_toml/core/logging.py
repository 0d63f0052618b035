"""Structured logging for find-cargo-toml (structlog).

Configured once at process start by the CLI; library modules just do::

    import structlog
    logger = structlog.get_logger()
    logger.debug("manifest_found", path="/work/Cargo.toml")

Everything is written to **stderr** so stdout carries only search
results.  Console rendering by default (``FIND_CARGO_TOML_LOG_JSON=false``),
JSON lines when piping into a log collector.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, level: str = "WARNING", json_output: bool = False) -> None:
    """Set up structlog + stdlib integration.

    Parameters
    ----------
    level:
        Root log level (``DEBUG``, ``INFO``, ``WARNING``, etc.).
    json_output:
        If *True*, render as JSON lines.  If *False*, use coloured console
        output.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    # Shared processors (run for every log event).
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def bind_search_context(*, input: str, file_name: str) -> None:
    """Attach the search parameters to every log event of this context.

    ``manifest_found`` and friends then carry ``input``/``file_name``
    without each call site repeating them.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(input=input, file_name=file_name)
