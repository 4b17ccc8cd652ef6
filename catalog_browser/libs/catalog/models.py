"""
Catalog Entry Models

Immutable records for the three OLM catalog schemas and the decoder that
turns a raw catalog document into one of them.
"""

import json
from typing import Any, Dict, NamedTuple, Optional, Tuple, Union

from ..core.constants import CatalogConstants, ErrorMessages
from ..core.exceptions import CatalogDecodeError
from ..core.utils import type_name


class Package(NamedTuple):
    """olm.package entry"""
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name}

    def format_text(self) -> str:
        return f"Package: {self.name}"


class ChannelEntry(NamedTuple):
    """One version node of a channel's upgrade graph"""
    name: str
    replaces: str = ""
    skips: Tuple[str, ...] = ()
    skip_range: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'replaces': self.replaces,
            'skips': list(self.skips),
            'skip_range': self.skip_range
        }


class Channel(NamedTuple):
    """olm.channel entry"""
    name: str
    package: str
    entries: Tuple[ChannelEntry, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'package': self.package,
            'entries': [entry.to_dict() for entry in self.entries]
        }

    def format_text(self) -> str:
        """
        Render the channel and its entries as an indented text block.

        Optional entry fields are only printed when set; skips are rendered
        as a literal list.
        """
        lines = [f"Channel: {self.name}", f"  Package: {self.package}", "  Entries:"]
        for entry in self.entries:
            lines.append(f"    - {entry.name}")
            if entry.replaces:
                lines.append(f"      replaces: {entry.replaces}")
            if entry.skips:
                lines.append(f"      skips: {json.dumps(list(entry.skips), ensure_ascii=False)}")
            if entry.skip_range is not None:
                lines.append(f"      skip_range: {entry.skip_range}")
        return '\n'.join(lines)


class Bundle(NamedTuple):
    """olm.bundle entry"""
    name: str
    image: str
    package: str

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'image': self.image, 'package': self.package}

    def format_text(self) -> str:
        return f"Bundle: {self.name}\n  Image: {self.image}\n  Package: {self.package}"


CatalogEntry = Union[Package, Channel, Bundle]


# Field specifications per schema: type, required flag, default, and the
# record attribute the document key maps to when the names differ.
ENTRY_SCHEMAS = {
    CatalogConstants.Schema.PACKAGE: {
        'name': {'type': str, 'required': True},
    },
    CatalogConstants.Schema.CHANNEL: {
        'name': {'type': str, 'required': True},
        'package': {'type': str, 'required': True},
        'entries': {'type': list, 'required': True},
    },
    CatalogConstants.Schema.BUNDLE: {
        'name': {'type': str, 'required': True},
        'image': {'type': str, 'required': True},
        'package': {'type': str, 'required': True},
    },
}

CHANNEL_ENTRY_SCHEMA = {
    'name': {'type': str, 'required': True},
    'replaces': {'type': str, 'required': False, 'default': ""},
    'skips': {'type': list, 'item_type': str, 'required': False, 'default': ()},
    CatalogConstants.SKIP_RANGE_FIELD: {
        'type': str, 'required': False, 'default': None, 'attribute': 'skip_range'
    },
}

_EXPECTED_NAMES = {str: "a string", list: "a sequence", dict: "a mapping"}


def _extract_fields(document: Dict[str, Any], schema: Dict[str, Dict[str, Any]],
                    path: str = "") -> Dict[str, Any]:
    """
    Validate a mapping against a field schema and collect record arguments

    Args:
        document: Raw mapping from the catalog stream
        schema: Field specification (see ENTRY_SCHEMAS)
        path: Location prefix for error messages

    Returns:
        Dict of record attribute name to value

    Raises:
        CatalogDecodeError: If a required field is missing or has the wrong type
    """
    values = {}
    for key, field_schema in schema.items():
        field_path = f"{path}{key}"
        attribute = field_schema.get('attribute', key)
        value = document.get(key)

        if value is None:
            if field_schema['required']:
                raise CatalogDecodeError(
                    ErrorMessages.DecodeError.MISSING_FIELD.format(field=field_path)
                )
            values[attribute] = field_schema['default']
            continue

        expected_type = field_schema['type']
        if not isinstance(value, expected_type):
            raise CatalogDecodeError(ErrorMessages.DecodeError.INVALID_TYPE.format(
                field=field_path, expected=_EXPECTED_NAMES[expected_type],
                type_name=type_name(value)
            ))

        item_type = field_schema.get('item_type')
        if item_type is not None:
            for index, item in enumerate(value):
                if not isinstance(item, item_type):
                    raise CatalogDecodeError(ErrorMessages.DecodeError.INVALID_TYPE.format(
                        field=f"{field_path}[{index}]", expected=_EXPECTED_NAMES[item_type],
                        type_name=type_name(item)
                    ))
            value = tuple(value)

        values[attribute] = value

    return values


def _decode_channel_entries(raw_entries: list) -> Tuple[ChannelEntry, ...]:
    entries = []
    for index, raw_entry in enumerate(raw_entries):
        if not isinstance(raw_entry, dict):
            raise CatalogDecodeError(ErrorMessages.DecodeError.INVALID_TYPE.format(
                field=f"entries[{index}]", expected="a mapping", type_name=type_name(raw_entry)
            ))
        fields = _extract_fields(raw_entry, CHANNEL_ENTRY_SCHEMA, path=f"entries[{index}].")
        entries.append(ChannelEntry(**fields))
    return tuple(entries)


def decode_entry(document: Any) -> CatalogEntry:
    """
    Decode one raw catalog document into a typed entry

    The ``schema`` field selects the record type. Keys that the selected
    record does not use are ignored.

    Args:
        document: Object produced by the YAML or JSON stream parser

    Returns:
        Package, Channel or Bundle

    Raises:
        CatalogDecodeError: If the schema tag is unknown or a field is invalid
    """
    if not isinstance(document, dict):
        raise CatalogDecodeError(
            ErrorMessages.DecodeError.NOT_A_MAPPING.format(type_name=type_name(document))
        )

    schema_tag = document.get(CatalogConstants.SCHEMA_FIELD)
    if schema_tag is None:
        raise CatalogDecodeError(ErrorMessages.DecodeError.MISSING_SCHEMA)

    try:
        schema = CatalogConstants.Schema(schema_tag)
    except ValueError:
        expected = ', '.join(f"`{s}`" for s in CatalogConstants.Schema.get_all_schemas())
        raise CatalogDecodeError(
            ErrorMessages.DecodeError.UNKNOWN_SCHEMA.format(schema=schema_tag, expected=expected)
        )

    fields = _extract_fields(document, ENTRY_SCHEMAS[schema])

    if schema == CatalogConstants.Schema.PACKAGE:
        return Package(**fields)
    if schema == CatalogConstants.Schema.CHANNEL:
        fields['entries'] = _decode_channel_entries(fields['entries'])
        return Channel(**fields)
    if schema == CatalogConstants.Schema.BUNDLE:
        return Bundle(**fields)

    raise CatalogDecodeError(f"no decoder registered for schema `{schema}`")
