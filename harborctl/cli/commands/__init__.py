"""
CLI Commands.

Organized by resource.
"""

from harborctl.cli.commands.labels import register as register_label_commands
from harborctl.cli.commands.system import app as system_app

__all__ = [
    "register_label_commands",
    "system_app",
]
