"""
Logging setup.

Библиотека не настраивает logging при импорте: модули получают logger через
get_logger(__name__), а приложение при необходимости вызывает setup_logging.
setup_logging трогает только logger пакета stark_math, root logger
приложения остаётся как есть.
"""

import logging
import sys
from typing import Final, Optional, TextIO

PACKAGE_LOGGER: Final[str] = "stark_math"

DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler, подключённый последним вызовом setup_logging
_handler: Optional[logging.Handler] = None


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Вывод записей stark_math в поток.

    Повторный вызов заменяет handler, а не добавляет второй.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат записи (DEFAULT_FORMAT если None)
        stream: Поток вывода (sys.stdout если None)

    Returns:
        Logger пакета stark_math

    Raises:
        ValueError: если уровень неизвестен
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())

    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(_handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger модуля (name обычно __name__)."""
    return logging.getLogger(name)
