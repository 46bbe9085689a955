"""CLI entry point for mdledger."""

from pathlib import Path

import typer

from mdledger.commands.admin import init_command
from mdledger.commands.summary import inspect_command, summary_command

app = typer.Typer(
    name="mdledger",
    help="Summarize a markdown bill ledger into income and expense totals",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Summarize a markdown bill ledger into income and expense totals."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default configuration file."""
    init_command(force)


@app.command()
def summary(
    path: Path = typer.Argument(None, help="Ledger file (default: ledger.path from config)"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default: XDG config)"),
    sort_by: str = typer.Option(None, "--sort-by", help="Sort by 'value' or 'alpha'"),
    histogram: bool = typer.Option(False, help="Show histogram of category totals"),
    daily: bool = typer.Option(False, "--daily", help="Show totals per date"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing progress"),
) -> None:
    """Show your income and expense breakdown."""
    summary_command(path, config, sort_by, histogram, daily, verbose)


@app.command()
def inspect(
    category: str,
    path: Path = typer.Argument(None, help="Ledger file (default: ledger.path from config)"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default: XDG config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing progress"),
) -> None:
    """Inspect the records of one category."""
    inspect_command(category, path, config, verbose)


if __name__ == "__main__":
    app()
