"""CLI command implementations for the printsheet application.

This package contains subcommands for the printsheet CLI, including:
- validate: Validate a print job configuration file
"""

from printsheet.cli.commands.validate import validate_command

__all__ = ["validate_command"]
