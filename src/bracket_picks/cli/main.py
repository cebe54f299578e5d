"""Typer CLI application for bracket_picks."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from bracket_picks.config import load_config
from bracket_picks.errors import BracketPicksError
from bracket_picks.utils.logger import configure_logging

app = typer.Typer(help="Log5 bracket odds and expected-points picks")
console = Console()


@app.callback()
def _callback() -> None:
    """bracket_picks CLI — tournament odds and pick selection."""


@app.command()
def predict(  # noqa: PLR0913
    ratings: Path = typer.Option(..., "--ratings", help="CSV of entrant names and ratings"),
    bracket: Path = typer.Option(..., "--bracket", help="JSON bracket layout (region → seed → name)"),
    config: Path | None = typer.Option(None, "--config", help="Path to JSON config override"),
    top: int = typer.Option(16, "--top", min=1, help="Entrants shown in the championship odds table"),
    log_level: str | None = typer.Option(None, "--log-level", help="QUIET | NORMAL | VERBOSE | DEBUG"),
) -> None:
    """Compute championship odds and pick a consistent max-EP bracket."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    for label, path in (("Ratings", ratings), ("Bracket", bracket), ("Config", config)):
        if path is not None and not path.exists():
            console.print(f"[red]Error: {label} file not found: {escape(str(path))}[/red]")
            raise typer.Exit(code=1)

    try:
        pick_config = load_config(config)
    except ValueError as exc:
        console.print(f"[red]Error: invalid config {escape(str(config))}:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1)

    from bracket_picks.cli.predict import run_predict

    try:
        run_predict(ratings_path=ratings, bracket_path=bracket, config=pick_config, top=top, console=console)
    except BracketPicksError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
