"""CLI command implementations for the framecut application.

This package contains subcommands for the framecut CLI, including:
- validate: Validate a cut job file
"""

from framecut.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
