"""
harborctl.

Command-line client for the Harbor registry management API.

- core/: Configuration, logging, exceptions, session store
- cli/: HTTP client, endpoint table, dispatcher and Typer commands
"""
