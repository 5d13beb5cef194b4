"""
HarnessConfig — конфигурация самопроверки

Все параметры задаются явно: переменные окружения и флаги командной
строки не читаются.
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.pair_adders import AdderStrategy

# Допустимые форматы вывода логов
LOG_FORMATS: Final[tuple[str, ...]] = ("console", "json")

# Допустимые уровни логирования
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class HarnessConfig:
    """Конфигурация самопроверки.

    Attributes:
        strategies: стратегии в порядке вывода секций
        strict_digits: strict разбор цифр при сложении
        log_level: уровень логирования (structlog, вывод в stderr)
        log_format: "console" или "json"
    """

    strategies: tuple[AdderStrategy, ...] = (AdderStrategy.ITERATIVE, AdderStrategy.COLUMNAR)
    strict_digits: bool = False
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self):
        if not self.strategies:
            raise ValueError("strategies must not be empty")
        for strategy in self.strategies:
            if not isinstance(strategy, AdderStrategy):
                raise ValueError(f"strategy must be AdderStrategy, got {strategy!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")
