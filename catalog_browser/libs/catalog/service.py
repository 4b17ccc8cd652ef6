"""
Catalog Service

Answers list and show queries against a loaded catalog index and renders
the results as text.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import CatalogConstants
from .index import CatalogIndex
from .models import CatalogEntry

logger = logging.getLogger(__name__)

ContentType = CatalogConstants.ContentType
OutputFormat = CatalogConstants.OutputFormat


class CatalogService:
    """Read-only query engine over a CatalogIndex"""

    def __init__(self, index: CatalogIndex):
        """
        Initialize catalog service

        Args:
            index: Grouped catalog entries
        """
        self.index = index

    @staticmethod
    def _to_content_type(content_type: Any) -> Optional[ContentType]:
        try:
            return ContentType(content_type)
        except ValueError:
            return None

    def list_content(self, content_type: str) -> str:
        """
        List the names of all packages, channels or bundles

        Args:
            content_type: 'packages', 'channels' or 'bundles'

        Returns:
            Header line followed by one '- <name>' line per item, or the
            unsupported content type message for any other value
        """
        content_type = self._to_content_type(content_type)

        if content_type == ContentType.PACKAGES:
            header, names = "Packages:", list(self.index.packages.keys())
        elif content_type == ContentType.CHANNELS:
            header, names = "Channels:", [c.name for c in self.index.iter_channels()]
        elif content_type == ContentType.BUNDLES:
            header, names = "Bundles:", [b.name for b in self.index.iter_bundles()]
        else:
            logger.debug(f"list does not support content type '{content_type}'")
            return CatalogConstants.UNSUPPORTED_CONTENT_TYPE

        return '\n'.join([header] + [f"- {name}" for name in names])

    def show_content(self, content_type: str, name: str, output_format: Optional[str] = None) -> str:
        """
        Show the full records for a package, or for a package's channels or bundles

        Channel and bundle lookups use ``name`` as the owning package name,
        so every channel (or bundle) of that package is shown. An unknown
        name produces empty output.

        Args:
            content_type: 'package', 'channel' or 'bundle'
            name: Package name to look up
            output_format: 'json' or 'text' to override the per-type default

        Returns:
            Rendered records, empty string when nothing matches, or the
            unsupported content type message for any other content type
        """
        content_type = self._to_content_type(content_type)

        if content_type == ContentType.PACKAGE:
            package = self.index.packages.get(name)
            records: List[CatalogEntry] = [package] if package else []
            default_format = OutputFormat.JSON
        elif content_type == ContentType.CHANNEL:
            records = list(self.index.channels.get(name, []))
            default_format = OutputFormat.TEXT
        elif content_type == ContentType.BUNDLE:
            records = list(self.index.bundles.get(name, []))
            default_format = OutputFormat.JSON
        else:
            logger.debug(f"show does not support content type '{content_type}'")
            return CatalogConstants.UNSUPPORTED_CONTENT_TYPE

        if not records:
            logger.debug(f"No {content_type} records found for '{name}'")
            return ""

        fmt = OutputFormat(output_format) if output_format else default_format
        return self._render(records, fmt)

    def _render(self, records: Iterable[CatalogEntry], fmt: OutputFormat) -> str:
        if fmt == OutputFormat.TEXT:
            return '\n'.join(record.format_text() for record in records)
        return '\n'.join(self._to_json(record.to_dict()) for record in records)

    @staticmethod
    def _to_json(data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2, separators=(',', ': '), ensure_ascii=False)

    def describe(self) -> Dict[str, int]:
        """Entry counts per kind, for debug logging"""
        return {
            'packages': len(self.index.packages),
            'channels': self.index.channel_count(),
            'bundles': self.index.bundle_count()
        }
