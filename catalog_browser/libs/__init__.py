"""
Catalog Browser Library

Loads OLM file-based catalogs and answers list/show queries against them.
"""

__version__ = "1.0.0"
__author__ = "OLMv1 Project"

# Core libraries
from .core import (
    ConfigManager,
    CatalogBrowserError, ConfigurationError, CatalogLoadError, ParsingError, CatalogDecodeError,
    CatalogConstants, FileConstants, ErrorMessages
)

# Catalog libraries
from .catalog import (
    CatalogIndex, CatalogLoader, CatalogParser, CatalogService,
    Package, Channel, ChannelEntry, Bundle, decode_entry
)

# Main application and help
from .help_manager import HelpManager
from .main_app import CatalogBrowser, main

__all__ = [
    # Core
    'ConfigManager',
    'CatalogBrowserError',
    'ConfigurationError',
    'CatalogLoadError',
    'ParsingError',
    'CatalogDecodeError',
    'CatalogConstants',
    'FileConstants',
    'ErrorMessages',
    # Catalog
    'CatalogIndex',
    'CatalogLoader',
    'CatalogParser',
    'CatalogService',
    'Package',
    'Channel',
    'ChannelEntry',
    'Bundle',
    'decode_entry',
    # Main
    'HelpManager',
    'CatalogBrowser',
    'main'
]
