#!/usr/bin/env python3
"""
harborctl CLI.

Command-line client for the Harbor registry management API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                  # Show help

    # Labels
    python cli.py labels_list -s g -p 1 -z 10             # List global labels
    python cli.py labels_list -s p -i 3                   # List labels of project 3
    python cli.py label_create -n qa -d "QA passed"       # Create a global label
    python cli.py label_get_by_id -i 100                  # Get label 100
    python cli.py label_update -i 100 -n qa -d "QA done"  # Update label 100
    python cli.py label_del_by_id -i 100                  # Delete label 100

    # System info
    python cli.py system info                             # Show app info
    python cli.py system config                           # Show configuration
    python cli.py system version                          # Show version

Every label command reads the session token from the session file
(session.cookie_file in config/settings/application.yaml) and sends it
as the beegosessionID cookie.

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from harborctl.cli.commands import register_label_commands, system_app
from harborctl.core.config import validate_project_root
from harborctl.core.logging import setup_logging

app = typer.Typer(
    name="harborctl",
    help="harborctl - Harbor registry management API client.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

register_label_commands(app)
app.add_typer(system_app, name="system")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    harborctl - Harbor registry management API client.

    Label listing, creation, retrieval, update and deletion.
    """
    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
