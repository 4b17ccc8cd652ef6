"""
Catalog Loader

Reads a catalog file from disk, parses its document stream and builds the
catalog index.
"""

import logging
from pathlib import Path
from typing import Optional

from ..core.constants import ErrorMessages, FileConstants
from ..core.exceptions import CatalogLoadError
from ..core.utils import format_bytes
from .index import CatalogIndex
from .parser import CatalogParser

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads catalog files into a CatalogIndex"""

    def __init__(self, parser: Optional[CatalogParser] = None):
        """
        Initialize catalog loader

        Args:
            parser: Document stream parser (defaults to CatalogParser)
        """
        self.parser = parser or CatalogParser()

    def read_text(self, file_path: str) -> str:
        """
        Read the whole catalog file as text

        Args:
            file_path: Path to the catalog file

        Returns:
            File contents

        Raises:
            CatalogLoadError: If the file is missing, unreadable or not text
        """
        path = Path(file_path)
        encoding = FileConstants.DEFAULT_ENCODING

        try:
            with open(path, 'r', encoding=encoding) as f:
                text = f.read()
        except FileNotFoundError:
            raise CatalogLoadError(ErrorMessages.LoadError.FILE_NOT_FOUND.format(path=file_path))
        except IsADirectoryError:
            raise CatalogLoadError(ErrorMessages.LoadError.NOT_A_FILE.format(path=file_path))
        except PermissionError:
            raise CatalogLoadError(ErrorMessages.LoadError.PERMISSION_DENIED.format(path=file_path))
        except UnicodeDecodeError:
            raise CatalogLoadError(
                ErrorMessages.LoadError.NOT_TEXT.format(encoding=encoding, path=file_path)
            )
        except OSError as e:
            raise CatalogLoadError(ErrorMessages.LoadError.READ_FAILED.format(path=file_path, error=e))

        logger.debug(f"Read catalog file {file_path} ({format_bytes(len(text.encode(encoding)))})")
        return text

    def load(self, file_path: str, stream_format: str = "auto") -> CatalogIndex:
        """
        Load a catalog file

        Args:
            file_path: Path to the catalog file
            stream_format: 'auto', 'yaml' or 'json'

        Returns:
            CatalogIndex built from every document that decoded

        Raises:
            CatalogLoadError: If the file cannot be read
        """
        text = self.read_text(file_path)
        resolved_format = self.parser.resolve_format(file_path, stream_format)
        entries = self.parser.parse_entries(text, resolved_format)
        return CatalogIndex.from_entries(entries)
