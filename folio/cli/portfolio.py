"""Portfolio CLI commands."""

from typing import Optional

import typer
from rich.table import Table

from folio.cli.common import USER_OPTION, console, fail, resolve_user
from folio.config import CURRENCY_SYMBOL
from folio.core.session import open_session

app = typer.Typer()

NO_DATA = "[yellow]No data available.[/yellow] Connect and sync a broker to see your portfolio."


def _money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:,.2f}"


def _signed(value: float, text: str) -> str:
    color = "green" if value >= 0 else "red"
    return f"[{color}]{text}[/{color}]"


@app.command("show")
def show_portfolio(user: Optional[str] = USER_OPTION):
    """Show portfolio totals across all brokers."""
    try:
        with open_session(resolve_user(user)) as session:
            portfolio = session.portfolio.get_portfolio(session.user_id)
    except Exception as e:
        fail(e)

    if not portfolio.portfolios:
        console.print(NO_DATA)
        return

    summary = portfolio.summary
    console.print(f"[bold]Current Value:[/bold] {_money(summary.current_value)}")
    console.print(f"[bold]Invested:[/bold]      {_money(summary.invested)}")
    console.print(
        f"[bold]Returns:[/bold]       "
        + _signed(summary.returns, f"{_money(summary.returns)} ({summary.returns_percent:+.2f}%)")
    )

    table = Table(title="By Broker")
    table.add_column("Broker", style="cyan")
    table.add_column("Holdings", justify="right")
    table.add_column("Invested", justify="right")
    table.add_column("Current Value", justify="right")
    table.add_column("Returns", justify="right")

    for record in portfolio.portfolios:
        if record.summary is None:
            table.add_row(record.broker, str(len(record.holdings)), "-", "-", "-")
            continue
        table.add_row(
            record.broker,
            str(len(record.holdings)),
            _money(record.summary.invested),
            _money(record.summary.current_value),
            _signed(record.summary.returns, f"{record.summary.returns_percent:+.2f}%"),
        )

    console.print(table)


@app.command("holdings")
def list_holdings(user: Optional[str] = USER_OPTION):
    """List holdings from every synced broker."""
    try:
        with open_session(resolve_user(user)) as session:
            portfolio = session.portfolio.get_portfolio(session.user_id)
    except Exception as e:
        fail(e)

    if not portfolio.holdings:
        console.print(NO_DATA)
        return

    table = Table(title="Holdings")
    table.add_column("Symbol", style="cyan")
    table.add_column("Name")
    table.add_column("Broker")
    table.add_column("Qty", justify="right")
    table.add_column("Avg Price", justify="right")
    table.add_column("LTP", justify="right")
    table.add_column("Current Value", justify="right")
    table.add_column("P&L", justify="right")

    for h in portfolio.holdings:
        pnl = h.current_value - h.invested_value
        table.add_row(
            h.symbol,
            h.name,
            h.broker or "-",
            f"{h.quantity:,.0f}",
            _money(h.avg_price),
            _money(h.current_price),
            _money(h.current_value),
            _signed(pnl, _money(pnl)),
        )

    console.print(table)
    console.print(f"\n[dim]Total holdings: {len(portfolio.holdings)}[/dim]")


@app.command("allocation")
def show_allocation(
    by_size: bool = typer.Option(False, "--by-size", help="Sort sectors by share"),
    user: Optional[str] = USER_OPTION,
):
    """Show sector allocation of current value."""
    try:
        with open_session(resolve_user(user)) as session:
            allocation = session.portfolio.get_allocation(session.user_id)
    except Exception as e:
        fail(e)

    if not allocation:
        console.print(NO_DATA)
        return

    rows = list(allocation.items())
    if by_size:
        rows.sort(key=lambda item: item[1], reverse=True)

    table = Table(title="Sector Allocation")
    table.add_column("Sector", style="cyan")
    table.add_column("Share", justify="right")

    for sector, percent in rows:
        table.add_row(sector, f"{percent:.1f}%")

    console.print(table)
