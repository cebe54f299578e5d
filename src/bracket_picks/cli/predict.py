"""Prediction pipeline orchestration.

Assembles ingestion, bracket construction, outcome computation and pick
selection into a single ``run_predict()`` function consumed by the Typer CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.table import Table

from bracket_picks.bracket import Bracket, build_bracket
from bracket_picks.config import PickConfig
from bracket_picks.errors import MalformedBracketError
from bracket_picks.evaluation import OutcomeEngine, PickSet, SelectionOptimizer
from bracket_picks.ingest import load_bracket_layout, load_ratings, resolve_entrants
from bracket_picks.utils.logger import get_logger

logger = get_logger("cli.predict")

_ROUND_NAMES: dict[int, str] = {
    1: "Round of 64",
    2: "Round of 32",
    3: "Sweet 16",
    4: "Elite 8",
    5: "Final Four",
    6: "Championship",
}


@dataclass(frozen=True)
class PredictionResult:
    """Everything a prediction run produces.

    Attributes:
        bracket: The validated bracket.
        champion_odds: P(win the final) per entrant, highest first.
        picks: The selected consistent bracket.
    """

    bracket: Bracket
    champion_odds: dict[str, float]
    picks: PickSet


def predict_bracket(bracket: Bracket, config: PickConfig) -> PredictionResult:
    """Run the outcome engine and the optimizer over a built bracket.

    Raises:
        MalformedBracketError: If the points table does not cover every round
            of *bracket*.
    """
    if bracket.n_rounds > len(config.points_table):
        msg = (
            f"Points table covers rounds 1-{len(config.points_table)} "
            f"but the bracket has {bracket.n_rounds} rounds"
        )
        raise MalformedBracketError(msg)

    engine = OutcomeEngine(bracket)
    outcomes = engine.all_outcomes()
    engine.check_normalised()

    optimizer = SelectionOptimizer(config.scoring_rule(), restore_prerequisites=config.restore_prerequisites)
    picks = optimizer.select(outcomes)
    return PredictionResult(bracket=bracket, champion_odds=engine.champion_probabilities(), picks=picks)


def run_predict(
    *,
    ratings_path: Path,
    bracket_path: Path,
    config: PickConfig,
    top: int = 16,
    console: Console | None = None,
) -> PredictionResult:
    """Execute the full load → build → evaluate → select pipeline and report it.

    Args:
        ratings_path: CSV of entrant ratings.
        bracket_path: JSON bracket layout.
        config: Run configuration.
        top: Number of entrants shown in the championship odds table.
        console: Rich Console for terminal output.  Pass
            ``Console(quiet=True)`` to suppress output.

    Returns:
        The :class:`PredictionResult` that was printed.
    """
    _console = console or Console()

    records = load_ratings(ratings_path, name_column=config.name_column, rating_column=config.rating_column)
    layout = load_bracket_layout(bracket_path)
    regions = resolve_entrants(layout, records, config.fuzzy_threshold)
    bracket = build_bracket(regions, config.semifinal_pairings)

    logger.info("Predicting %d games with %r scoring", len(bracket), config.scoring)
    result = predict_bracket(bracket, config)

    _console.print(_odds_table(result.champion_odds, top))
    _console.print(_picks_table(result.picks))
    _console.print(
        f"[bold]Champion pick:[/bold] {result.picks.champion}    "
        f"[bold]Expected points:[/bold] {result.picks.total_expected_points:.2f}"
    )
    return result


def _odds_table(champion_odds: dict[str, float], top: int) -> Table:
    table = Table(title="Championship odds")
    table.add_column("#", justify="right")
    table.add_column("Entrant")
    table.add_column("P(champion)", justify="right")
    for rank, (name, probability) in enumerate(list(champion_odds.items())[:top], start=1):
        table.add_row(str(rank), name, f"{probability:.2%}")
    return table


def _picks_table(picks: PickSet) -> Table:
    table = Table(title="Picks")
    table.add_column("Round")
    table.add_column("Game", justify="right")
    table.add_column("Region")
    table.add_column("Winner")
    table.add_column("Seed", justify="right")
    table.add_column("P(win)", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("EP", justify="right")
    for pick in picks.picks:
        game = pick.outcome.game
        table.add_row(
            _ROUND_NAMES.get(game.round, f"Round {game.round}"),
            str(game.number),
            game.region,
            pick.outcome.winner.name,
            str(pick.outcome.winner.seed),
            f"{pick.outcome.probability:.1%}",
            f"{pick.points:g}",
            f"{pick.expected_points:.2f}",
        )
    return table
