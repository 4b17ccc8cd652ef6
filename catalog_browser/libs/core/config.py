"""
Configuration Management

Handles loading and managing configuration files for the Catalog Browser tool.
"""

import logging
from io import StringIO
from pathlib import Path
from typing import Dict, Any

import yaml
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from .exceptions import ConfigurationError
from .constants import CatalogConstants, ErrorMessages, FileConstants

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and validation"""

    # Configuration schema - defines expected structure and types
    CONFIG_SCHEMA = {
        'catalog': {
            'type': dict,
            'required': False,
            'fields': {
                'file': {'type': str, 'required': False},
                'format': {
                    'type': str, 'required': False,
                    'choices': CatalogConstants.StreamFormat.get_choices()
                }
            }
        },
        'output': {
            'type': dict,
            'required': False,
            'fields': {
                'format': {
                    'type': str, 'required': False,
                    'choices': CatalogConstants.OutputFormat.get_choices()
                }
            }
        },
        'global': {
            'type': dict,
            'required': False,
            'fields': {
                'debug': {'type': bool, 'required': False}
            }
        },
    }

    def __init__(self):
        """Initialize configuration manager"""
        self.config_data = {}
        self.config_file_path = None

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file

        Args:
            config_path: Path to configuration file

        Returns:
            Dict containing configuration data

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(
                ErrorMessages.ConfigError.CONFIG_FILE_NOT_FOUND.format(config_path=config_path)
            )

        if not config_file.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_file, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file {config_path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        self.config_file_path = config_path
        logger.debug(f"Loaded configuration from {config_path}")

        # Validate configuration structure
        self._validate_config()

        return self.config_data

    def _validate_config(self) -> None:
        """
        Validate configuration structure and values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.config_data, dict):
            raise ConfigurationError("Configuration must be a dictionary")

        self._validate_against_schema(self.config_data, self.CONFIG_SCHEMA, "config")

    def _validate_against_schema(self, data: Dict[str, Any], schema: Dict[str, Any], path: str = "") -> None:
        """
        Validate data against schema definition

        Args:
            data: Data to validate
            schema: Schema definition
            path: Current path for error reporting

        Raises:
            ConfigurationError: If data doesn't match schema
        """
        for key, field_schema in schema.items():
            current_path = f"{path}.{key}" if path else key

            if key in data:
                value = data[key]

                # Skip None values for optional fields
                if value is None and not field_schema.get('required', False):
                    continue

                expected_type = field_schema['type']
                if not isinstance(value, expected_type):
                    raise ConfigurationError(f"{current_path} must be a {expected_type.__name__}")

                if 'choices' in field_schema and value not in field_schema['choices']:
                    choices_str = ', '.join(f"'{c}'" for c in field_schema['choices'])
                    raise ConfigurationError(f"{current_path} must be one of: {choices_str}")

                # Recursively validate nested dictionaries
                if expected_type == dict and 'fields' in field_schema:
                    self._validate_against_schema(value, field_schema['fields'], current_path)

            elif field_schema.get('required', False):
                raise ConfigurationError(f"Required field {current_path} is missing")

    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key

        Args:
            key: Configuration key (supports dot notation like 'catalog.file')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config_data
        try:
            for k in key.split('.'):
                value = value[k]
        except (KeyError, TypeError):
            return default
        return default if value is None else value

    def get_config_template_content(self) -> str:
        """
        Generate configuration template content as string without file I/O

        Returns:
            str: YAML configuration template content with comments
        """
        template = CommentedMap()
        template.yaml_set_start_comment(
            "Catalog Browser Configuration File\n"
            "Command-line flags take precedence over these values"
        )

        catalog = CommentedMap()
        catalog['file'] = "catalog.yaml"
        catalog.yaml_add_eol_comment("used when --file is not given", 'file')
        catalog['format'] = CatalogConstants.StreamFormat.AUTO.value
        catalog.yaml_add_eol_comment("auto | yaml | json", 'format')
        template['catalog'] = catalog

        output = CommentedMap()
        # Unset so each content type keeps its own default rendering
        output['format'] = None
        output.yaml_add_eol_comment("json | text (show command, unset: per content type)", 'format')
        template['output'] = output

        global_section = CommentedMap()
        global_section['debug'] = False
        template['global'] = global_section

        yaml_processor = YAML()
        yaml_processor.width = 4096  # Prevent line wrapping
        yaml_processor.indent(mapping=2, sequence=4, offset=2)

        stream = StringIO()
        yaml_processor.dump(template, stream)
        return stream.getvalue()

    def generate_config_template(self, output_dir: str = None) -> str:
        """
        Generate configuration template file

        Args:
            output_dir: Directory to save template (optional, defaults to cwd)

        Returns:
            str: Path to generated template file

        Raises:
            ConfigurationError: If template generation fails
        """
        content = self.get_config_template_content()

        try:
            output_path = Path(output_dir) if output_dir else Path.cwd()
            output_path.mkdir(parents=True, exist_ok=True)
            config_file = output_path / FileConstants.DEFAULT_CONFIG_FILE

            with open(config_file, 'w', encoding=FileConstants.DEFAULT_ENCODING) as f:
                f.write(content)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration file: {e}")

        logger.info(f"Configuration file written: {config_file}")
        return str(config_file)
