"""
CLI Client Module.

Command-line client built with Typer for calling the Harbor management API.

Architecture:
- Commands bind flags to a parameter schema (schemas/)
- The endpoint table maps each operation to a verb and path (endpoints.py)
- One generic dispatcher sends the request and prints the result (dispatch.py)
- The HTTP layer is httpx (client.py)

Usage:
    python cli.py --help
    python cli.py labels_list -s g
    python cli.py label_get_by_id -i 100
"""
