"""
Help Manager

Manages granular help text for different commands and operations.
"""

from pathlib import Path
from typing import Optional

from .core.constants import FileConstants


class HelpManager:
    """Manages help text and documentation"""

    def __init__(self):
        self.help_dir = Path(__file__).parent.parent / "help"

    def get_help(self, command: str) -> str:
        """Get help text for a specific command"""
        # Convert dashes to underscores for file names
        command_file = command.replace('-', '_')
        help_file = self.help_dir / f"{command_file}_help.txt"

        if help_file.exists():
            with open(help_file, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                return f.read()
        else:
            return f"No help available for command: {command}"

    def get_main_help(self) -> str:
        """Get main help text"""
        return self.get_help("main")

    def get_examples(self, command: str) -> str:
        """Get examples help text for a command"""
        return self.get_help(f"{command}_examples")

    def show_help(self, command: Optional[str] = None) -> None:
        """Show help for command or main help if no command specified"""
        if command is None:
            print(self.get_main_help())
        else:
            print(self.get_help(command))

    def show_examples(self, command: str) -> None:
        """Show examples help"""
        print(self.get_examples(command))
