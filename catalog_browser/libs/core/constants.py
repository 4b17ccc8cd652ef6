"""
Constants Module

Centralized constants for the Catalog Browser tool to eliminate magic strings
and improve maintainability.
"""

from enum import Enum


class BaseStrEnum(str, Enum):
    """Base enum class that inherits from str"""

    def __str__(self) -> str:
        """Return the enum value as string"""
        return self.value

    def __repr__(self) -> str:
        """Return a detailed representation of the enum"""
        return f"{self.__class__.__name__}.{self.name}"


class CatalogConstants:
    """File-based catalog constants"""

    # Field names as they appear in catalog documents
    SCHEMA_FIELD = "schema"
    SKIP_RANGE_FIELD = "SkipRange"

    # Output strings
    UNSUPPORTED_CONTENT_TYPE = "Unsupported content type"

    class Schema(BaseStrEnum):
        """OLM catalog schema types understood by the browser"""
        PACKAGE = "olm.package"
        CHANNEL = "olm.channel"
        BUNDLE = "olm.bundle"

        @classmethod
        def get_all_schemas(cls) -> list:
            """Get all supported schema tags"""
            return [cls.PACKAGE, cls.CHANNEL, cls.BUNDLE]

    class ContentType(BaseStrEnum):
        """Content types accepted by the list and show commands"""
        PACKAGES = "packages"
        CHANNELS = "channels"
        BUNDLES = "bundles"
        PACKAGE = "package"
        CHANNEL = "channel"
        BUNDLE = "bundle"

        @classmethod
        def get_choices(cls) -> list:
            """Get all content type values for argument parsing"""
            return [member.value for member in cls]

    class OutputFormat(BaseStrEnum):
        """Rendering styles for the show command"""
        JSON = "json"
        TEXT = "text"

        @classmethod
        def get_choices(cls) -> list:
            """Get all output format values for argument parsing"""
            return [member.value for member in cls]

    class StreamFormat(BaseStrEnum):
        """Document stream encodings of a catalog file"""
        AUTO = "auto"
        YAML = "yaml"
        JSON = "json"

        @classmethod
        def get_choices(cls) -> list:
            """Get all stream format values for argument parsing"""
            return [member.value for member in cls]


class FileConstants:
    """File and directory related constants"""

    DEFAULT_CONFIG_FILE = "catalog-browser-config.yaml"
    DEFAULT_ENCODING = "utf-8"

    class FileExtension(BaseStrEnum):
        """File extensions used in the Catalog Browser tool"""
        YAML = ".yaml"
        YML = ".yml"
        JSON = ".json"
        NDJSON = ".ndjson"

        @classmethod
        def get_json_stream_extensions(cls) -> list:
            """Get file extensions that hold a JSON document stream"""
            return [cls.JSON, cls.NDJSON]


class ErrorMessages:
    """Centralized error message templates"""

    class LoadError(BaseStrEnum):
        """Catalog file read error message templates"""
        FILE_NOT_FOUND = "Catalog file not found: {path}"
        NOT_A_FILE = "Catalog path is not a file: {path}"
        PERMISSION_DENIED = "Permission denied reading catalog file: {path}"
        NOT_TEXT = "Catalog file is not valid {encoding} text: {path}"
        READ_FAILED = "Failed to read the catalog file {path}: {error}"

    class DecodeError(BaseStrEnum):
        """Per-document decode error message templates"""
        NOT_A_MAPPING = "document is not a mapping (got {type_name})"
        MISSING_SCHEMA = "missing field `schema`"
        UNKNOWN_SCHEMA = (
            "unknown schema `{schema}`, expected one of {expected}"
        )
        MISSING_FIELD = "missing field `{field}`"
        INVALID_TYPE = "invalid type for `{field}`: expected {expected}, got {type_name}"
        DOCUMENT_FAILED = "Failed to decode catalog document #{index}: {error}"

    class ConfigError(BaseStrEnum):
        """Configuration-related error message templates"""
        CONFIG_FILE_NOT_FOUND = "Configuration file not found: {config_path}"
        NO_CATALOG_FILE = (
            "No catalog file specified. Pass --file <path> or set catalog.file "
            "in the configuration file."
        )
