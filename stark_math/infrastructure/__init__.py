"""
Infrastructure helpers (logging).
"""

from stark_math.infrastructure.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
