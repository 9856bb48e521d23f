"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from zenguess.config import get_settings
from zenguess.config.settings import configure_logging
from zenguess.engine.gateway import build_gateway

app = typer.Typer(
    name="zenguess",
    help="ZenGuess - prediction market quoting, trading and settlement engine.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
) -> None:
    """Configure logging and build an in-memory gateway for this invocation."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {"settings": settings, "gateway": build_gateway(settings), "profile": profile}


# Subcommands registered from other modules
from zenguess.cli import activity, markets, trade  # noqa: E402

app.add_typer(markets.app, name="markets")
app.add_typer(trade.app, name="trade")
app.command("activity")(activity.show_activity)
app.command("portfolio")(activity.show_portfolio)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
