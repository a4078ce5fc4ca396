"""
Тесты для infrastructure.logging
"""

import io
import logging

import pytest

from stark_math.core.math.rational import RationalNumber
from stark_math.infrastructure import get_logger, setup_logging
from stark_math.infrastructure.logging import PACKAGE_LOGGER


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = logger.level
    previous_handlers = list(logger.handlers)
    yield logger
    logger.handlers = previous_handlers
    logger.setLevel(previous_level)


class TestLogging:
    """Тесты setup_logging и get_logger"""

    def test_get_logger_uses_module_name(self) -> None:
        logger = get_logger("stark_math.core.math.rational")
        assert logger.name == "stark_math.core.math.rational"
        assert logger is logging.getLogger("stark_math.core.math.rational")

    def test_library_adds_no_handlers(self) -> None:
        """Библиотека не настраивает logging при импорте"""
        import stark_math  # noqa: F401

        assert get_logger("stark_math.core.math.structural_hash").handlers == []

    def test_setup_logging_writes_package_records(self, package_logger) -> None:
        stream = io.StringIO()
        logger = setup_logging(level="debug", stream=stream)

        assert logger is package_logger
        assert package_logger.level == logging.DEBUG
        RationalNumber.try_parse("oops")
        assert "stark_math.core.math.rational - DEBUG - Rejected rational input" in (
            stream.getvalue()
        )

    def test_setup_logging_replaces_handler(self, package_logger) -> None:
        first, second = io.StringIO(), io.StringIO()
        setup_logging(stream=first)
        setup_logging(level="warning", format_string="%(message)s", stream=second)

        assert len(package_logger.handlers) == 1
        get_logger("stark_math.core.math.structural_hash").warning("limit hit")
        assert first.getvalue() == ""
        assert second.getvalue() == "limit hit\n"

    def test_root_logger_untouched(self, package_logger) -> None:
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(stream=io.StringIO())
        assert logging.getLogger().handlers == root_handlers

    def test_unknown_level_rejected(self, package_logger) -> None:
        with pytest.raises(ValueError):
            setup_logging(level="loud")
