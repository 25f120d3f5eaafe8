"""Configuration, logging and errors shared by the dynum package."""

from .config import Settings, get_settings, settings
from .errors import (
    ConversionError,
    DivisionByZeroError,
    InvalidStateError,
    NumberError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "NumberError",
    "InvalidStateError",
    "DivisionByZeroError",
    "ConversionError",
    "get_logger",
    "get_context_logger",
    "setup_logging",
]
