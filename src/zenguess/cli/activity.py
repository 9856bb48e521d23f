"""Activity feed and portfolio commands."""

from __future__ import annotations

import typer


def show_activity(
    ctx: typer.Context,
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, max=500, help="Max events to show"),
) -> None:
    """Show the activity feed, newest first."""
    gateway = ctx.obj["gateway"]
    events = gateway.list_activity(limit or ctx.obj["settings"].activity_limit)
    for e in events:
        typer.echo(f"  {e.timestamp.isoformat()}  {e.type.value:<16} {e.market_id:<12} {e.description}")
    typer.echo(f"Total: {len(events)} events")


def show_portfolio(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Account address"),
) -> None:
    """Show positions derived from the account's trades."""
    positions = ctx.obj["gateway"].get_portfolio(address)
    if not positions:
        typer.echo(f"No positions for {address}")
        return
    for p in positions:
        typer.echo(
            f"  {p.market_id:<12} {p.outcome:<6} {p.shares:>10.2f} avg {p.avg_price:.4f} "
            f"now {p.current_price:.4f}  pnl {p.pnl:+,.2f}  {p.status.value}"
        )
