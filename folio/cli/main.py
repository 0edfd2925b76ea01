"""Main CLI entry point using Typer."""

import logging

import typer
from rich.console import Console

from folio.cli.common import fail
from folio.db.database import init_db
from folio.config import PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION, get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Reduce noise from third-party libraries
logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

console = Console()
app = typer.Typer(
    name="folio",
    help=f"{PRODUCT_NAME}: {PRODUCT_TAGLINE}",
    add_completion=False,
)


@app.callback()
def main_callback():
    """Initialize database on startup."""
    try:
        init_db()
    except Exception as e:
        fail(e)


# Import and add subcommands
from folio.cli.brokers import app as brokers_app
from folio.cli.portfolio import app as portfolio_app

app.add_typer(brokers_app, name="brokers", help="Connect, sync and disconnect broker accounts")
app.add_typer(portfolio_app, name="portfolio", help="View the consolidated portfolio")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold #4F46E5]{PRODUCT_NAME}[/]")
    console.print(f"[bold]Version:[/] {PRODUCT_VERSION}")
    console.print(f"[bold]Tagline:[/] {PRODUCT_TAGLINE}")


if __name__ == "__main__":
    app()
