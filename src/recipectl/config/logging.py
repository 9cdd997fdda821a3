"""structlog configuration for recipectl.

Services log through structlog (``structlog.get_logger``) with bound
recipe/output paths; the validation engine logs through plain stdlib
loggers under ``recipectl.*``. Both end up on one stderr handler so
diagnostics never mix with results on stdout.

Log levels:
- default: WARNING and above (unreadable outputs, invalid recipes,
  plugin failures, validator exceptions)
- ``-v``: DEBUG for ``recipectl.*``, which traces each layout and the
  spec or field that failed
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "recipectl"

# Third-party loggers kept at WARNING even with -v.
_QUIET_LOGGERS = ("pluggy",)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records to a single stderr handler.

    Args:
        verbose: Lower the ``recipectl`` logger to DEBUG.
        log_json: Emit one JSON object per record instead of console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
