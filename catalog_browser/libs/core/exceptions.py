"""
Custom Exceptions

Defines custom exception classes for the Catalog Browser tool.
"""


class CatalogBrowserError(Exception):
    """Base exception class for Catalog Browser errors"""
    pass


class ConfigurationError(CatalogBrowserError):
    """Raised when configuration is invalid or missing"""
    pass


class CatalogLoadError(CatalogBrowserError):
    """Raised when the catalog file cannot be read"""
    pass


class ParsingError(CatalogBrowserError):
    """Raised when data parsing fails"""
    pass


class CatalogDecodeError(ParsingError):
    """Raised when a document does not decode into a catalog entry"""
    pass
