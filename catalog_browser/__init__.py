"""
Catalog Browser

A command-line tool to browse OLM file-based catalogs: list the packages,
channels and bundles of a catalog file and inspect them by package.
"""

__version__ = "1.0.0"
__author__ = "OLMv1 Project"

from .libs import (
    # Core
    ConfigManager, CatalogBrowserError, ConfigurationError, CatalogLoadError,
    ParsingError, CatalogDecodeError, CatalogConstants, FileConstants, ErrorMessages,
    # Catalog
    CatalogIndex, CatalogLoader, CatalogParser, CatalogService,
    Package, Channel, ChannelEntry, Bundle, decode_entry,
    # Main
    HelpManager, CatalogBrowser, main
)

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
