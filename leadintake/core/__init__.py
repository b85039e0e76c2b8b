# leadintake/core/__init__.py
"""
Core package for configuration, logging, and shared exceptions.
"""

from leadintake.core.config import Settings, settings
from leadintake.core.logging import configure_structlog, get_structlog_logger

__all__ = [
    "Settings",
    "settings",
    "configure_structlog",
    "get_structlog_logger",
]
