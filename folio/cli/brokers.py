"""Broker connection CLI commands."""

from typing import Optional

import typer
from rich.table import Table

from folio.cli.common import USER_OPTION, console, fail, resolve_user
from folio.config import CURRENCY_SYMBOL
from folio.core.session import open_session

app = typer.Typer()


@app.command("connect")
def connect_broker(
    broker: str = typer.Argument(..., help="Broker identifier (e.g., zerodha)"),
    client_id: str = typer.Option(..., "--client-id", "-c", help="Broker client id"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Broker API key"),
    api_secret: Optional[str] = typer.Option(None, "--api-secret", help="Broker API secret"),
    user: Optional[str] = USER_OPTION,
):
    """Connect a broker account."""
    try:
        with open_session(resolve_user(user)) as session:
            connection = session.brokers.connect_broker(
                session.user_id,
                broker,
                client_id,
                api_key=api_key,
                api_secret=api_secret,
            )
    except Exception as e:
        fail(e)

    console.print(
        f"[green]Connected:[/green] {connection.broker} (client {connection.client_id})"
    )
    console.print("Run 'folio brokers sync' to fetch holdings.")


@app.command("list")
def list_brokers(user: Optional[str] = USER_OPTION):
    """List connected broker accounts."""
    try:
        with open_session(resolve_user(user)) as session:
            connections = session.brokers.list_connections(session.user_id)
    except Exception as e:
        fail(e)

    if not connections:
        console.print("[yellow]No connected brokers.[/yellow] Use 'connect' to add one.")
        return

    table = Table(title="Connected Brokers")
    table.add_column("Broker", style="cyan")
    table.add_column("Client ID")
    table.add_column("Status")
    table.add_column("Connected")
    table.add_column("Last Synced")

    for connection in connections.values():
        table.add_row(
            connection.broker,
            connection.client_id,
            f"[green]{connection.status.value}[/green]",
            connection.connected_at.strftime("%Y-%m-%d %H:%M"),
            connection.last_synced.strftime("%Y-%m-%d %H:%M")
            if connection.last_synced
            else "Never",
        )

    console.print(table)


@app.command("sync")
def sync_brokers(
    broker: Optional[str] = typer.Argument(None, help="Broker to sync (default: all)"),
    user: Optional[str] = USER_OPTION,
):
    """Sync holdings from connected brokers."""
    try:
        with open_session(resolve_user(user)) as session:
            with console.status("Syncing..."):
                if broker:
                    records = [session.brokers.sync_broker(session.user_id, broker)]
                else:
                    records = session.brokers.sync_all(session.user_id)
    except Exception as e:
        fail(e)

    if not records:
        console.print("[yellow]No connected brokers to sync.[/yellow]")
        return

    for record in records:
        console.print(
            f"[green]{record.broker}:[/green] {len(record.holdings)} holdings, "
            f"value {CURRENCY_SYMBOL}{record.summary.current_value:,.2f}"
        )


@app.command("disconnect")
def disconnect_broker(
    broker: str = typer.Argument(..., help="Broker to disconnect"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    user: Optional[str] = USER_OPTION,
):
    """Disconnect a broker and delete its synced holdings."""
    if not force:
        confirm = typer.confirm(f"Disconnect {broker} and delete its holdings?")
        if not confirm:
            console.print("[yellow]Cancelled.[/yellow]")
            raise typer.Exit(0)

    try:
        with open_session(resolve_user(user)) as session:
            session.brokers.disconnect_broker(session.user_id, broker)
    except Exception as e:
        fail(e)

    console.print(f"[green]Disconnected {broker}.[/green]")
