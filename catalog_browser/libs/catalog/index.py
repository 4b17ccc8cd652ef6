"""
Catalog Index

Groups decoded catalog entries by kind and owning package.
"""

import logging
from typing import Dict, Iterable, Iterator, List

from .models import Bundle, CatalogEntry, Channel, Package

logger = logging.getLogger(__name__)


class CatalogIndex:
    """
    Packages keyed by name, channels and bundles keyed by package name.

    Keys iterate in first-insertion order and each package's channel and
    bundle lists keep document order. A package name seen twice keeps the
    last record.
    """

    def __init__(self):
        self.packages: Dict[str, Package] = {}
        self.channels: Dict[str, List[Channel]] = {}
        self.bundles: Dict[str, List[Bundle]] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> 'CatalogIndex':
        index = cls()
        for entry in entries:
            index.add(entry)
        logger.debug(
            f"Indexed {len(index.packages)} packages, {index.channel_count()} channels, "
            f"{index.bundle_count()} bundles"
        )
        return index

    def add(self, entry: CatalogEntry) -> None:
        """Insert one entry into the grouping for its kind"""
        if isinstance(entry, Package):
            self.packages[entry.name] = entry
        elif isinstance(entry, Channel):
            self.channels.setdefault(entry.package, []).append(entry)
        elif isinstance(entry, Bundle):
            self.bundles.setdefault(entry.package, []).append(entry)
        else:
            raise TypeError(f"Not a catalog entry: {type(entry).__name__}")

    def iter_channels(self) -> Iterator[Channel]:
        """Every channel, package-group order then document order"""
        for channels in self.channels.values():
            yield from channels

    def iter_bundles(self) -> Iterator[Bundle]:
        """Every bundle, package-group order then document order"""
        for bundles in self.bundles.values():
            yield from bundles

    def channel_count(self) -> int:
        return sum(len(channels) for channels in self.channels.values())

    def bundle_count(self) -> int:
        return sum(len(bundles) for bundles in self.bundles.values())
