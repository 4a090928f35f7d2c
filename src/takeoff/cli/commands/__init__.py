"""CLI command implementations for the takeoff application.

This package contains subcommands for the takeoff CLI, including:
- validate: Validate a takeoff file
- tiers: Show tier-derived defaults and locked fields
"""

from takeoff.cli.commands.tiers import tiers_command
from takeoff.cli.commands.validate import validate_command

__all__ = ["tiers_command", "validate_command"]
