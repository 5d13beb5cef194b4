"""
Настройка structlog для самопроверки.

Логи пишутся в stderr: stdout зарезервирован под отчёт о сценариях.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """
    Настройка structlog: уровень фильтрации и формат вывода.

    Args:
        level: имя уровня ("DEBUG", "INFO", ...)
        log_format: "json" (машиночитаемый) или "console" (для человека)
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Повторная настройка должна действовать на уже созданные логгеры
        cache_logger_on_first_use=False,
    )
