"""
Catalog Libraries

Loads OLM file-based catalogs and answers list/show queries against them.
"""

from .index import CatalogIndex
from .loader import CatalogLoader
from .models import Bundle, CatalogEntry, Channel, ChannelEntry, Package, decode_entry
from .parser import CatalogParser, RawDocument
from .service import CatalogService

__all__ = [
    'CatalogIndex',
    'CatalogLoader',
    'Bundle',
    'CatalogEntry',
    'Channel',
    'ChannelEntry',
    'Package',
    'decode_entry',
    'CatalogParser',
    'RawDocument',
    'CatalogService'
]
