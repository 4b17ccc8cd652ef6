"""
Protocols and Interfaces

Defines protocols (interfaces) for dependency injection and type hints.
"""

from typing import Protocol, Dict, Any, Optional


class ConfigProvider(Protocol):
    """Protocol for configuration providers"""

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from file"""
        ...

    def generate_config_template(self, output_dir: str = None) -> str:
        """Generate configuration template file"""
        ...

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key"""
        ...


class CatalogProvider(Protocol):
    """Protocol for catalog loaders"""

    def load(self, file_path: str, stream_format: str = "auto") -> Any:
        """Read a catalog file and return its grouped index"""
        ...


class HelpProvider(Protocol):
    """Protocol for help providers"""

    def show_help(self, command: Optional[str] = None) -> None:
        """Show help for command or main help"""
        ...

    def show_examples(self, command: str) -> None:
        """Show usage examples for a command"""
        ...
