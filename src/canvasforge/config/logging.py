"""structlog wiring for the canvasforge engines.

Engine modules log through ``structlog.get_logger(__name__)``, so every
event lands under the ``canvasforge`` stdlib logger. Nothing here runs on
import: :class:`~canvasforge.services.context.ServiceContext` calls
:func:`configure_logging` with its settings, and an embedding service that
owns logging can skip it.

``settings.log_json`` picks JSON lines over console output;
``settings.verbose`` opens the ``canvasforge`` logger down to DEBUG
(``layout.document_assembled``, ``variation.selected``, ``span.complete``).
Other libraries stay at WARNING either way.
"""

from __future__ import annotations

import logging
import sys

import structlog

from canvasforge.config.settings import CanvasforgeSettings

LOGGER_NAME = "canvasforge"

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def engine_log_level(settings: CanvasforgeSettings) -> int:
    """Level for the ``canvasforge`` logger under *settings*."""
    return logging.DEBUG if settings.verbose else logging.WARNING


def configure_logging(settings: CanvasforgeSettings) -> None:
    """Route structlog and stdlib records to one stderr handler.

    Safe to call again with new settings: the root handler is replaced,
    never stacked.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(engine_log_level(settings))
