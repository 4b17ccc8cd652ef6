"""
Core Libraries

Shared functionality and utilities for the Catalog Browser tool.
"""

from .config import ConfigManager
from .constants import CatalogConstants, FileConstants, ErrorMessages
from .exceptions import (
    CatalogBrowserError, ConfigurationError, CatalogLoadError,
    ParsingError, CatalogDecodeError
)
from .protocols import ConfigProvider, CatalogProvider, HelpProvider
from .utils import setup_logging, type_name, format_bytes, truncate_string

__all__ = [
    # Main classes
    'ConfigManager',
    # Constants
    'CatalogConstants',
    'FileConstants',
    'ErrorMessages',
    # Exceptions
    'CatalogBrowserError',
    'ConfigurationError',
    'CatalogLoadError',
    'ParsingError',
    'CatalogDecodeError',
    # Protocols
    'ConfigProvider',
    'CatalogProvider',
    'HelpProvider',
    # Utilities
    'setup_logging',
    'type_name',
    'format_bytes',
    'truncate_string'
]
