"""
Catalog Stream Parser

Splits a catalog file's text into individual documents (YAML document
stream or concatenated JSON objects) and decodes each one into a typed
catalog entry. A broken document is reported and skipped; it never stops
the rest of the stream from being read.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterator, List, NamedTuple, Optional

import yaml

from ..core.constants import CatalogConstants, ErrorMessages, FileConstants
from ..core.exceptions import CatalogDecodeError, ParsingError
from ..core.utils import truncate_string
from .models import CatalogEntry, decode_entry

logger = logging.getLogger(__name__)

# YAML document markers are only recognised at column 0
DOCUMENT_START = re.compile(r'^---(?=\s|$)')
DOCUMENT_END = re.compile(r'^\.\.\.(?=\s|$)')
# Top-level JSON objects in an `opm render` style stream start at column 0
JSON_OBJECT_START = re.compile(r'^\{', re.MULTILINE)
WHITESPACE = re.compile(r'\s*')


class CatalogYAMLLoader(yaml.SafeLoader):
    """
    Safe loader resolving plain scalars the way the YAML 1.2 core schema does

    Only true/false are booleans and dates stay strings, so names such as
    ``no`` or ``2024-01-01`` decode as text.
    """


CatalogYAMLLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag not in ('tag:yaml.org,2002:bool', 'tag:yaml.org,2002:timestamp')
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CatalogYAMLLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF')
)


class RawDocument(NamedTuple):
    """One document of the stream, before decoding"""
    index: int
    line: int
    data: Any = None
    error: Optional[ParsingError] = None


class CatalogParser:
    """Parses catalog document streams into catalog entries"""

    def resolve_format(self, file_path: str, stream_format: str = "auto") -> str:
        """
        Pick the stream format for a catalog file

        Args:
            file_path: Path of the catalog file
            stream_format: 'auto', 'yaml' or 'json'

        Returns:
            'yaml' or 'json'
        """
        fmt = CatalogConstants.StreamFormat(stream_format)
        if fmt != CatalogConstants.StreamFormat.AUTO:
            return fmt.value

        suffix = Path(file_path).suffix.lower()
        if suffix in FileConstants.FileExtension.get_json_stream_extensions():
            return CatalogConstants.StreamFormat.JSON.value
        return CatalogConstants.StreamFormat.YAML.value

    def iter_documents(self, text: str, stream_format: str = "yaml") -> Iterator[RawDocument]:
        """
        Iterate over the raw documents of a catalog stream

        Args:
            text: Full catalog text
            stream_format: 'yaml' or 'json'

        Yields:
            RawDocument with either parsed data or a parsing error
        """
        if stream_format == CatalogConstants.StreamFormat.JSON:
            return self._iter_json_documents(text)
        return self._iter_yaml_documents(text)

    def _split_yaml_stream(self, text: str) -> Iterator[tuple]:
        """
        Split YAML text at document markers

        Yields:
            (first line number, chunk text) for every chunk with content
        """
        chunk_lines: List[str] = []
        chunk_start = 1

        for line_num, line in enumerate(text.splitlines(keepends=True), 1):
            if DOCUMENT_START.match(line):
                yield chunk_start, ''.join(chunk_lines)
                # Inline content after the marker belongs to the new document
                chunk_lines = [line[3:]]
                chunk_start = line_num
            elif DOCUMENT_END.match(line):
                yield chunk_start, ''.join(chunk_lines)
                chunk_lines = []
                chunk_start = line_num + 1
            else:
                chunk_lines.append(line)

        yield chunk_start, ''.join(chunk_lines)

    @staticmethod
    def _has_content(chunk: str) -> bool:
        for line in chunk.splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith('#') and not line.startswith('%'):
                return True
        return False

    def _iter_yaml_documents(self, text: str) -> Iterator[RawDocument]:
        index = 0
        for line, chunk in self._split_yaml_stream(text):
            if not self._has_content(chunk):
                continue

            index += 1
            try:
                data = yaml.load(chunk, Loader=CatalogYAMLLoader)
            except yaml.YAMLError as e:
                logger.debug(f"Problematic document #{index}: {truncate_string(chunk, 200)}")
                yield RawDocument(index, line, error=ParsingError(f"invalid YAML: {e}"))
                continue

            yield RawDocument(index, line, data=data)

    def _iter_json_documents(self, text: str) -> Iterator[RawDocument]:
        decoder = json.JSONDecoder()
        index = 0
        pos = WHITESPACE.match(text, 0).end()
        # Line numbers are counted incrementally from the previous document
        line = 1
        counted_to = 0

        while pos < len(text):
            index += 1
            line += text.count('\n', counted_to, pos)
            counted_to = pos
            try:
                data, end = decoder.raw_decode(text, pos)
            except json.JSONDecodeError as e:
                logger.debug(f"Problematic line: {truncate_string(text[pos:pos + 200], 200)}")
                yield RawDocument(index, line, error=ParsingError(f"invalid JSON: {e}"))
                # Resume at the next object that starts a line
                match = JSON_OBJECT_START.search(text, pos + 1)
                pos = match.start() if match else len(text)
                continue

            yield RawDocument(index, line, data=data)
            pos = WHITESPACE.match(text, end).end()

    def parse_entries(self, text: str, stream_format: str = "yaml") -> List[CatalogEntry]:
        """
        Parse and decode every document of a catalog stream

        Documents that fail to parse or decode are logged as warnings and
        skipped; the remaining entries are returned in stream order.

        Args:
            text: Full catalog text
            stream_format: 'yaml' or 'json'

        Returns:
            List of decoded catalog entries
        """
        logger.debug(f"Parsing {stream_format.upper()} catalog stream ({len(text)} characters)")

        entries: List[CatalogEntry] = []
        skipped = 0

        for document in self.iter_documents(text, stream_format):
            error = document.error
            if error is None and document.data is None:
                logger.debug(f"Skipping empty document #{document.index} (line {document.line})")
                continue

            if error is None:
                try:
                    entries.append(decode_entry(document.data))
                    continue
                except CatalogDecodeError as e:
                    error = e

            skipped += 1
            logger.warning(
                ErrorMessages.DecodeError.DOCUMENT_FAILED.format(index=document.index, error=error)
                + f" (line {document.line})"
            )

        logger.debug(f"Decoded {len(entries)} catalog entries, skipped {skipped} documents")
        return entries
