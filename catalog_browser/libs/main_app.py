"""
Main Application

Command-line front end tying together the core and catalog libraries.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

# Core libraries
from .core import ConfigManager, setup_logging
from .core.constants import CatalogConstants, ErrorMessages
from .core.exceptions import CatalogLoadError, ConfigurationError
from .core.protocols import CatalogProvider, ConfigProvider, HelpProvider

# Catalog libraries
from .catalog import CatalogLoader, CatalogService

from .help_manager import HelpManager

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """Main application orchestrator for the Catalog Browser tool"""

    def __init__(
        self,
        config_provider: Optional[ConfigProvider] = None,
        catalog_provider: Optional[CatalogProvider] = None,
        help_provider: Optional[HelpProvider] = None,
        debug: bool = False
    ):
        """
        Initialize Catalog Browser with dependency injection

        Args:
            config_provider: Configuration provider (defaults to ConfigManager)
            catalog_provider: Catalog loader (defaults to CatalogLoader)
            help_provider: Help manager (defaults to HelpManager)
            debug: Enable debug logging
        """
        self.debug = debug

        setup_logging(debug)

        self.config_manager = config_provider or ConfigManager()
        self.catalog_loader = catalog_provider or CatalogLoader()
        self.help_manager = help_provider or HelpManager()

        # Set by load_catalog()
        self.catalog_service: Optional[CatalogService] = None

    def enable_debug(self) -> None:
        """Switch to debug logging if it is not already on"""
        if not self.debug:
            self.debug = True
            setup_logging(True)

    def show_help(self) -> None:
        """Print the main help text"""
        self.help_manager.show_help()

    def show_examples(self, command: str) -> None:
        """Print usage examples for a command"""
        self.help_manager.show_examples(command)

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from file

        Args:
            config_path: Path to configuration file

        Returns:
            Dict containing configuration data
        """
        return self.config_manager.load_config(config_path)

    def generate_config(self, output_dir: str = None) -> str:
        """
        Generate configuration template

        Args:
            output_dir: Directory to save template (optional)

        Returns:
            str: Path to generated template file
        """
        return self.config_manager.generate_config_template(output_dir)

    def load_catalog(self, file_path: str, stream_format: str = "auto") -> CatalogService:
        """
        Load a catalog file and prepare the query service

        Args:
            file_path: Path to the catalog file
            stream_format: 'auto', 'yaml' or 'json'

        Returns:
            CatalogService over the loaded catalog

        Raises:
            CatalogLoadError: If the catalog file cannot be read
        """
        index = self.catalog_loader.load(file_path, stream_format)
        self.catalog_service = CatalogService(index)
        logger.debug(f"Loaded catalog {file_path}: {self.catalog_service.describe()}")
        return self.catalog_service

    def list_content(self, content_type: str) -> int:
        """
        Print the names of all items of a content type

        Args:
            content_type: Content type selected on the command line

        Returns:
            int: Exit code
        """
        self._print_output(self._require_service().list_content(content_type))
        return 0

    def show_content(self, content_type: str, name: str, output_format: Optional[str] = None) -> int:
        """
        Print the records matching a content type and package name

        Args:
            content_type: Content type selected on the command line
            name: Package name to look up
            output_format: Optional 'json' or 'text' override

        Returns:
            int: Exit code
        """
        self._print_output(self._require_service().show_content(content_type, name, output_format))
        return 0

    def _require_service(self) -> CatalogService:
        if self.catalog_service is None:
            raise ConfigurationError("Catalog not loaded. Call load_catalog() first.")
        return self.catalog_service

    def _print_output(self, text: str) -> None:
        """
        Print query output, nothing at all for an empty result

        Args:
            text: Rendered query result
        """
        if text:
            print(text)


# Factory function for easy creation
def create_catalog_browser(debug: bool = False) -> CatalogBrowser:
    """
    Factory function to create CatalogBrowser with default dependencies

    Args:
        debug: Enable debug logging

    Returns:
        CatalogBrowser: Configured CatalogBrowser instance
    """
    return CatalogBrowser(debug=debug)


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure argument parser with subcommands.

    Global options may be given before or after the subcommand.
    """
    content_types = CatalogConstants.ContentType.get_choices()

    # Common parser: arguments shared by ALL commands. Defaults are suppressed
    # so values given before the subcommand are not overwritten.
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        '--debug', action='store_true', default=argparse.SUPPRESS,
        help='Enable debug logging'
    )
    common_parser.add_argument(
        '--examples', action='store_true',
        help='Show usage examples for this command'
    )

    # Catalog parser: arguments shared by commands that read a catalog
    catalog_parser = argparse.ArgumentParser(add_help=False)
    catalog_parser.add_argument(
        '-f', '--file', default=argparse.SUPPRESS, help='Path to the catalog file'
    )
    catalog_parser.add_argument(
        '--config', default=argparse.SUPPRESS, help='Configuration file path'
    )
    catalog_parser.add_argument(
        '--format', choices=CatalogConstants.StreamFormat.get_choices(),
        default=argparse.SUPPRESS, help='Catalog stream format (default: auto)'
    )

    # Main parser with custom help override
    parser = argparse.ArgumentParser(
        prog='catalog-browser',
        description='Catalog Browser - Browse OLM file-based catalog files',
        add_help=False  # Disable default help to override behavior
    )
    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Show this help message and exit'
    )
    parser.add_argument('-f', '--file', help='Path to the catalog file')
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument(
        '--format', choices=CatalogConstants.StreamFormat.get_choices(),
        help='Catalog stream format (default: auto)'
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser(
        'list',
        parents=[common_parser, catalog_parser],
        help='List content in the catalog',
        description='List the packages, channels or bundles of a catalog'
    )
    # Positionals are optional to argparse so `<command> --examples` works;
    # validate_command_arguments() enforces them afterwards
    list_parser.add_argument(
        'content_type', nargs='?', choices=content_types, help='Type of content to list'
    )

    show_parser = subparsers.add_parser(
        'show',
        parents=[common_parser, catalog_parser],
        help='Show details of specific content',
        description=(
            'Show a package, or every channel or bundle of a package '
            '(channel and bundle names are looked up as package names)'
        )
    )
    show_parser.add_argument(
        'content_type', nargs='?', choices=content_types, help='Type of content to show'
    )
    show_parser.add_argument('name', nargs='?', help='Name of the content to show')
    show_parser.add_argument(
        '--output', choices=CatalogConstants.OutputFormat.get_choices(),
        help='Render records as json or text (default depends on content type)'
    )

    generate_parser = subparsers.add_parser(
        'generate-config',
        parents=[common_parser],
        help='Generate configuration template',
        description='Generate a configuration template file for the Catalog Browser'
    )
    generate_parser.add_argument('--output', help='Output directory for the template')

    return parser


def handle_examples(command_name: str, browser: CatalogBrowser) -> bool:
    """Handle examples flag for any command. Returns True if examples were shown."""
    browser.show_examples(command_name)
    return True


def handle_early_exit_flags(args, argv: List[str], browser: CatalogBrowser) -> bool:
    """Handle early-exit flags like --help and --examples"""
    # No arguments at all: show main help
    if not argv:
        browser.show_help()
        return True

    # --help without a subcommand shows main_help.txt
    if getattr(args, 'help', False) and not args.command:
        browser.show_help()
        return True

    if getattr(args, 'examples', False) and args.command:
        return handle_examples(args.command, browser)

    return False


# Positionals each command needs once --examples has been ruled out
REQUIRED_POSITIONALS = {
    'list': ['content_type'],
    'show': ['content_type', 'name'],
}


def validate_command_arguments(parser: argparse.ArgumentParser, args) -> None:
    """Exit with a usage error if a command is missing its positional arguments"""
    missing = [
        name for name in REQUIRED_POSITIONALS.get(args.command, [])
        if getattr(args, name, None) is None
    ]
    if missing:
        parser.error(
            f"{args.command}: the following arguments are required: {', '.join(missing)}"
        )


def load_configuration(args, browser: CatalogBrowser) -> Optional[ConfigProvider]:
    """Load the configuration file named on the command line, if any"""
    if not getattr(args, 'config', None):
        return None

    browser.load_config(args.config)
    return browser.config_manager


def merge_config_with_args(args, config: Optional[ConfigProvider]) -> None:
    """
    Fill unset command-line options from the configuration file

    Command-line values always win. Missing values fall back to built-in
    defaults.
    """
    def from_config(key: str, default: Any = None) -> Any:
        return config.get_value(key, default) if config else default

    args.file = getattr(args, 'file', None) or from_config('catalog.file')
    args.format = (
        getattr(args, 'format', None)
        or from_config('catalog.format', CatalogConstants.StreamFormat.AUTO.value)
    )
    args.debug = getattr(args, 'debug', False) or from_config('global.debug', False)

    if args.command == 'show':
        args.output = args.output or from_config('output.format')


def requires_catalog(command: str) -> bool:
    """Determine if a command reads the catalog file"""
    return command in {'list', 'show'}


def handle_list_command(args, browser: CatalogBrowser) -> int:
    """Handle the list command"""
    return browser.list_content(args.content_type)


def handle_show_command(args, browser: CatalogBrowser) -> int:
    """Handle the show command"""
    return browser.show_content(args.content_type, args.name, args.output)


def handle_generate_config_command(args, browser: CatalogBrowser) -> int:
    """Handle the generate-config command"""
    config_path = browser.generate_config(args.output)
    print(f"Configuration template written to: {config_path}")
    return 0


COMMAND_HANDLERS = {
    'list': handle_list_command,
    'show': handle_show_command,
    'generate-config': handle_generate_config_command,
}


def dispatch_command(args, browser: CatalogBrowser) -> int:
    """Dispatch to the appropriate command handler"""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1
    return handler(args, browser)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point with unified execution flow"""
    argv = sys.argv[1:] if argv is None else argv

    # Step 1: Parse arguments
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Step 2: Create the application (sets up logging from the command line)
    browser = create_catalog_browser(debug=getattr(args, 'debug', False))

    # Step 3: Handle early-exit flags like --help and --examples
    if handle_early_exit_flags(args, argv, browser):
        return

    # Step 4: Validate command was specified with its arguments
    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        sys.exit(1)
    validate_command_arguments(parser, args)

    try:
        # Step 5: Load configuration and merge it with the command line
        config = load_configuration(args, browser)
        merge_config_with_args(args, config)
        if args.debug:
            browser.enable_debug()

        # Step 6: Load the catalog for commands that query it
        if requires_catalog(args.command):
            if not args.file:
                raise ConfigurationError(ErrorMessages.ConfigError.NO_CATALOG_FILE)
            browser.load_catalog(args.file, args.format)

        # Step 7: Dispatch to the command handler
        exit_code = dispatch_command(args, browser)

    except (CatalogLoadError, ConfigurationError) as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
