"""Utility functions for the object tracker"""

from .config_validator import ConfigLoader, ConfigValidator
from .io import format_position, parse_bbox, parse_header, read_session, setup_logging

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "setup_logging",
    "parse_header",
    "parse_bbox",
    "read_session",
    "format_position",
]
