"""Markets subcommand: list, show, history."""

from __future__ import annotations

import typer

from zenguess.errors import EngineError
from zenguess.models import MarketCategory, MarketFilters, MarketSort, MarketStatus

app = typer.Typer(help="Market listing and details")


@app.command("list")
def list_markets(
    ctx: typer.Context,
    category: MarketCategory | None = typer.Option(None, "--category", "-c", help="Filter by category"),
    status: MarketStatus | None = typer.Option(None, "--status", "-s", help="Filter by derived status"),
    query: str | None = typer.Option(None, "--query", "-q", help="Search question text and tags"),
    sort: MarketSort = typer.Option(MarketSort.VOLUME, "--sort", help="Sort order"),
) -> None:
    """List markets."""
    gateway = ctx.obj["gateway"]
    markets = gateway.list_markets(MarketFilters(category=category, status=status, query=query, sort=sort))
    for m in markets:
        odds = "  ".join(f"{o.label} {o.probability:.0%}" for o in m.outcomes)
        typer.echo(f"  {m.id:<12} {m.status.value:<9} {m.volume:>14,.2f}  {m.question[:60]}  [{odds}]")
    typer.echo(f"Total: {len(markets)} markets")


@app.command("show")
def show_market(
    ctx: typer.Context,
    market_id: str = typer.Argument(..., help="Market ID"),
) -> None:
    """Show one market and its recent trades."""
    gateway = ctx.obj["gateway"]
    market = gateway.get_market(market_id)
    if market is None:
        typer.echo(f"Market not found: {market_id}")
        raise typer.Exit(1)
    typer.echo(f"{market.id}: {market.question}")
    typer.echo(f"Category: {market.category.value}  Status: {market.status.value}")
    typer.echo(f"Ends: {market.end_time.isoformat()}  Volume: {market.volume:,.2f}  Liquidity: {market.liquidity:,.2f}")
    for i, o in enumerate(market.outcomes):
        marker = " (winner)" if market.resolved_outcome == i else ""
        typer.echo(f"  [{i}] {o.label:<10} {o.probability:.4f}{marker}")
    trades = gateway.list_trades(market.id)
    if trades:
        typer.echo("Recent trades:")
        for t in trades[:10]:
            typer.echo(
                f"  {t.timestamp.isoformat()}  {t.side.value.upper():<4} {t.shares:>10.2f} "
                f"{t.outcome_label} @ {t.price:.2f}  total {t.total:,.2f}"
            )


@app.command("history")
def market_history(
    ctx: typer.Context,
    market_id: str = typer.Argument(..., help="Market ID"),
    outcome: int = typer.Option(0, "--outcome", "-o", help="Outcome index"),
    days: int = typer.Option(30, "--days", "-d", min=1, max=365, help="Days of history"),
) -> None:
    """Print a daily odds series for one outcome."""
    try:
        points = ctx.obj["gateway"].price_history(market_id, outcome, days)
    except EngineError as e:
        typer.echo(e.message)
        raise typer.Exit(1) from e
    for p in points:
        typer.echo(f"  {p.day.isoformat()}  {p.yes:>3}% / {p.no:>3}%")
