"""Shared CLI utilities."""

import asyncio
import logging
from dataclasses import dataclass
from functools import wraps
from pathlib import Path

import click

from ..clients.api import TreinoApi
from ..clients.base import HttpClient
from ..clients.http_client import HttpxClient
from ..clients.navigation import CliNavigator
from ..clients.storage import JsonFileStore
from ..clients.token_codec import JwtTokenCodec
from ..config import DEFAULT_API_URL, get_session_path
from ..services.session_guard import SessionGuard


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


@dataclass
class Settings:
    """Options given to the root command."""

    api_url: str = DEFAULT_API_URL
    data_dir: Path | None = None
    verbose: bool = False


@dataclass
class Services:
    """Everything a command needs to talk to the API."""

    api: TreinoApi
    store: JsonFileStore
    guard: SessionGuard
    navigator: CliNavigator


def configure_logging(verbose: bool) -> None:
    """Send logs to stderr: everything when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_http_client() -> HttpClient:
    """Create the HTTP transport used by commands."""
    return HttpxClient()


def build_services(ctx: click.Context) -> Services:
    """Wire the collaborators for the current invocation."""
    settings = ctx.find_object(Settings) or Settings()
    store = JsonFileStore(get_session_path(settings.data_dir))
    navigator = CliNavigator()
    return Services(
        api=TreinoApi(create_http_client(), settings.api_url),
        store=store,
        guard=SessionGuard(store, JwtTokenCodec(), navigator),
        navigator=navigator,
    )


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERRO] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[AVISO] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip()]
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
