"""Structured logging for the calculation engine, built on structlog.

The engine never configures logging on import. A workflow host calls
setup_logging() once with its EngineSettings; until then structlog falls
back to its defaults and engine events still reach stdout.

Engine modules log through ``get_logger(__name__)`` with snake_case event
names and Decimal values passed as strings.
"""

import logging

import structlog

from ethena_engine.config import EngineSettings

_RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": structlog.dev.ConsoleRenderer,
}


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_logging(settings: EngineSettings | None = None) -> None:
    """Route engine logs through the stdlib root logger.

    Args:
        settings: Engine settings; ``log_level`` sets the root level and
            ``log_format`` picks JSON lines (log aggregators) or console
            output (local runs). Loaded from the environment when omitted.
    """
    settings = settings or EngineSettings()
    renderer = _RENDERERS[settings.log_format]()

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.getLevelName(settings.log_level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
