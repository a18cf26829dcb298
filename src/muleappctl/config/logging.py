"""structlog rendering for muleappctl's stdlib log records.

Modules log through ``logging.getLogger(__name__)``; this module renders
those records to stderr, as colored console lines by default or JSON
lines with ``--log-json``.

Install records pass ``extra={"stage": ...}`` (``target``, ``domain`` or
``archive``) and the stage is rendered as its own field, so a build log
can be filtered by pipeline stage.
"""

from __future__ import annotations

import logging
import sys

import structlog

#: ``LogRecord`` extras copied into the rendered event.
RECORD_EXTRAS = ("stage",)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib records through structlog's ``ProcessorFormatter``.

    Args:
        verbose: Show the INFO copy/rename records (and DEBUG) of the
            ``muleappctl`` loggers. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Calling again replaces the handler installed by the previous call.
    """
    app_level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=RECORD_EXTRAS),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("muleappctl").setLevel(app_level)
