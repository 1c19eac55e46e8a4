"""
Request Dispatcher.

Generic send path shared by every command: build the URL, load the session,
attach it as a cookie, send, and print the status line and body.

Local failures (configuration, session) stop the command before anything
is sent. Transport errors and non-2xx responses are printed as-is and the
command exits 1. There is no retry.
"""

import httpx
import typer
from pydantic import BaseModel
from rich.console import Console

from harborctl.cli.client import close_api_client, get_api_client
from harborctl.cli.endpoints import Endpoint
from harborctl.core.config import get_app_config
from harborctl.core.exceptions import ApplicationError
from harborctl.core.logging import get_logger, log_with_source
from harborctl.core.session import cookie_header, load_session

logger = get_logger(__name__)
console = Console()


def echo(text: str) -> None:
    """Print wire text verbatim: no markup, highlighting, emoji codes, or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_status(response: httpx.Response) -> None:
    """Print the response status line and body."""
    echo(f"<== Rsp Status: {response.status_code} {response.reason_phrase}")
    echo(f"<== Rsp Body: {response.text}")


def dispatch(endpoint: Endpoint, params: BaseModel) -> httpx.Response:
    """
    Send one request for an endpoint.

    Args:
        endpoint: Verb, path template and body mapping
        params: Validated parameter schema

    Returns:
        The 2xx response.

    Raises:
        typer.Exit: With code 1 on local failure, transport error, or non-2xx status
    """
    try:
        target_url = endpoint.url(params)
        echo(f"==> {endpoint.method} {target_url}")

        session = load_session()
        language = get_app_config().application.session.language
    except ApplicationError as e:
        echo(f"Error: {e.message}")
        raise typer.Exit(1) from e

    headers = {"Cookie": cookie_header(session, language)}
    body = endpoint.body(params)
    if body is not None:
        echo(f"==> request body: {body}")
        headers["Content-Type"] = "application/json"

    client = get_api_client()
    try:
        response = client.request(endpoint.method, target_url, headers=headers, content=body)
    except httpx.HTTPError as e:
        echo(f"Error: {e}")
        raise typer.Exit(1) from e
    finally:
        close_api_client()

    print_status(response)

    if not response.is_success:
        log_with_source(
            logger,
            "cli",
            "warning",
            "Request rejected",
            method=endpoint.method,
            url=target_url,
            status_code=response.status_code,
        )
        raise typer.Exit(1)

    return response
