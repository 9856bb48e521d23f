"""Trade subcommand: quote, submit."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from zenguess.errors import EngineError
from zenguess.models import TradeRequest, TradeSide

app = typer.Typer(help="Quote and submit trades against the in-memory ledger")


def _request(
    market_id: str,
    outcome: int,
    amount: float,
    side: TradeSide,
    slippage: float = 1.0,
    trader: str | None = None,
) -> TradeRequest:
    try:
        return TradeRequest(
            market_id=market_id,
            outcome_index=outcome,
            amount=amount,
            side=side,
            slippage=slippage,
            trader_address=trader,
        )
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            typer.echo(f"Invalid {loc}: {err['msg']}")
        raise typer.Exit(2) from e


@app.command("quote")
def quote_trade(
    ctx: typer.Context,
    market_id: str = typer.Argument(..., help="Market ID"),
    outcome: int = typer.Option(0, "--outcome", "-o", help="Outcome index"),
    amount: float = typer.Option(..., "--amount", "-a", help="USD amount"),
    side: TradeSide = typer.Option(TradeSide.BUY, "--side", help="buy or sell"),
) -> None:
    """Show the estimated cost and shares for a trade without executing it."""
    req = _request(market_id, outcome, amount, side)
    try:
        q = ctx.obj["gateway"].simulate_trade(req.market_id, req.outcome_index, req.amount, req.side)
    except EngineError as e:
        typer.echo(e.message)
        raise typer.Exit(1) from e
    typer.echo(f"Shares: {q.estimated_shares:.4f}")
    typer.echo(f"Cost: {q.estimated_cost:.4f}  Fee: {q.fee:.4f}  Price: {q.average_price:.4f}")


@app.command("submit")
def submit_trade(
    ctx: typer.Context,
    market_id: str = typer.Argument(..., help="Market ID"),
    outcome: int = typer.Option(0, "--outcome", "-o", help="Outcome index"),
    amount: float = typer.Option(..., "--amount", "-a", help="USD amount"),
    side: TradeSide = typer.Option(TradeSide.BUY, "--side", help="buy or sell"),
    slippage: float = typer.Option(1.0, "--slippage", help="Price movement tolerance in percent"),
    trader: str | None = typer.Option(None, "--trader", "-t", help="Trader address"),
) -> None:
    """Execute a trade and print the receipt."""
    req = _request(market_id, outcome, amount, side, slippage, trader)
    try:
        receipt = ctx.obj["gateway"].submit_request(req)
    except EngineError as e:
        typer.echo(e.message)
        raise typer.Exit(1) from e
    t = receipt.trade
    typer.echo(f"Tx: {receipt.tx_hash}")
    typer.echo(f"{t.side.value.upper()} {t.shares:.4f} {t.outcome_label} @ {t.price:.4f}  total {t.total:.4f}")
