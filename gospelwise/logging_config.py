"""
Structured logging for the export pipeline.

Provides structlog configuration for:
- Export attempts and their outcome (success / error)
- API request handling

Uses stdout for container compatibility (no file configuration).
"""

import logging

import structlog


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structlog.

    Args:
        level: Minimum log level name (e.g., "INFO", "DEBUG")
        json_output: Render JSON lines when True, human-readable console
            output otherwise
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Renderer modules log through stdlib logging
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", level=numeric_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a bound logger with the specified module name.

    Args:
        name: Module name for log attribution (e.g., "export_service")

    Returns:
        BoundLogger instance with module context
    """
    return structlog.get_logger(module=name)
