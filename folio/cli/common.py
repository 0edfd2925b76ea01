"""Options and error reporting shared by the CLI commands."""

import logging
from typing import NoReturn, Optional

import typer
from rich.console import Console

from folio.config import get_settings
from folio.core.brokers import BrokerError

logger = logging.getLogger(__name__)
settings = get_settings()
console = Console()

USER_OPTION = typer.Option(
    None,
    "--user",
    "-u",
    help="User id (default: demo user)",
)


def resolve_user(user: Optional[str]) -> str:
    return user or settings.default_user_id


def fail(error: Exception) -> NoReturn:
    """Print ``error`` in red and exit with status 1.

    Expected broker errors are user mistakes; anything else is logged as
    well so the cause is not lost.
    """
    if not isinstance(error, BrokerError):
        logger.error(f"Command failed: {type(error).__name__}: {error}")
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
