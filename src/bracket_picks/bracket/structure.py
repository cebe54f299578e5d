"""Bracket tree data structures.

* :class:`Entrant` — an immutable tournament participant.
* :class:`Game` — a node of the single-elimination game tree.  Leaf games
  (round 1) hold two entrants; every later game holds two feeder games.
* :class:`Bracket` — the arena owning every game of a run.  It validates the
  tree on construction and wires each feeder's ``parent`` pointer, which is
  never touched again afterwards.

Invariants enforced by :class:`Bracket`:

- Leaf games are round 1 and hold exactly two distinct entrants.
- Non-leaf games hold exactly two feeder games from the same arena.
- Rounds strictly increase from every feeder to the game it feeds.
- Every game but the root feeds exactly one game; there is exactly one root.
- Every entrant appears in exactly one leaf game.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from bracket_picks.errors import MalformedBracketError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entrant:
    """A single bracket entrant.

    Attributes:
        name: Unique display name; also the entrant's identity.
        rating: Pythagorean-style efficiency rating in ``(0, 1)``.
        seed: Seed within its region, used only for the scoring bonus.
    """

    name: str
    rating: float
    seed: int


@dataclass(eq=False)
class Game:
    """Node of the bracket tree.

    Games compare by identity; ``number`` is the stable, human-facing key.

    Attributes:
        number: Unique game number within the bracket.
        round: Round number, 1 for first-round games.
        region: Region label (opaque, used only when building the tree).
        entrants: The two entrants of a leaf game, ``None`` otherwise.
        feeders: The two feeder games of a non-leaf game, ``None`` otherwise.
        parent: The game this game's winner advances to.  Set by
            :class:`Bracket`; ``None`` for the root.
    """

    number: int
    round: int
    region: str
    entrants: tuple[Entrant, Entrant] | None = None
    feeders: tuple[Game, Game] | None = None
    parent: Game | None = field(default=None, init=False, repr=False)

    @property
    def is_leaf(self) -> bool:
        """Return ``True`` for a game whose entrants are assigned directly."""
        return self.feeders is None

    def leaf_entrants(self) -> list[Entrant]:
        """Return every entrant in this game's subtree, left to right."""
        if self.feeders is None:
            return list(self.entrants or ())
        left, right = self.feeders
        return left.leaf_entrants() + right.leaf_entrants()

    def feeder_for(self, entrant: Entrant) -> Game | None:
        """Return the feeder game whose subtree contains *entrant*.

        Returns ``None`` for leaf games and for entrants outside the subtree.
        """
        if self.feeders is None:
            return None
        for feeder in self.feeders:
            if entrant in feeder.leaf_entrants():
                return feeder
        return None

    def describe(self) -> str:
        """Return a short label such as ``"R2 #35 (East)"``."""
        return f"R{self.round} #{self.number} ({self.region})"


class Bracket:
    """Validated arena of games forming one single-elimination tree.

    Args:
        games: Every game of the tournament, in any order.

    Raises:
        MalformedBracketError: If the games do not form a valid tree.
    """

    def __init__(self, games: Iterable[Game]) -> None:
        ordered = sorted(games, key=lambda g: g.number)
        if not ordered:
            msg = "A bracket needs at least one game"
            raise MalformedBracketError(msg)

        self._by_number: dict[int, Game] = {}
        for game in ordered:
            if game.number in self._by_number:
                msg = f"Duplicate game number {game.number}"
                raise MalformedBracketError(msg)
            self._by_number[game.number] = game

        for game in ordered:
            _check_shape(game)

        parents = self._collect_parents(ordered)
        roots = [g for g in ordered if g.number not in parents]
        if len(roots) != 1:
            msg = f"Expected exactly one root game, found {len(roots)}: {[g.number for g in roots]}"
            raise MalformedBracketError(msg)
        self._root = roots[0]

        self._check_reachable()
        self._check_unique_entrants(ordered)

        for number, parent in parents.items():
            self._by_number[number].parent = parent

        self._games: tuple[Game, ...] = tuple(ordered)
        logger.debug(
            "bracket: %d games, %d rounds, %d entrants",
            len(self._games),
            self._root.round,
            len(self.entrants),
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _collect_parents(self, ordered: list[Game]) -> dict[int, Game]:
        parents: dict[int, Game] = {}
        for game in ordered:
            if game.feeders is None:
                continue
            for feeder in game.feeders:
                if self._by_number.get(feeder.number) is not feeder:
                    msg = f"Game {game.number} is fed by game {feeder.number}, which is not part of this bracket"
                    raise MalformedBracketError(msg)
                if feeder.round >= game.round:
                    msg = (
                        f"Round must increase toward the root: game {feeder.number} (round {feeder.round}) "
                        f"feeds game {game.number} (round {game.round})"
                    )
                    raise MalformedBracketError(msg)
                if feeder.number in parents:
                    msg = (
                        f"Game {feeder.number} feeds both game {parents[feeder.number].number} "
                        f"and game {game.number}"
                    )
                    raise MalformedBracketError(msg)
                parents[feeder.number] = game
        return parents

    def _check_reachable(self) -> None:
        seen: set[int] = set()
        stack: list[Game] = [self._root]
        while stack:
            game = stack.pop()
            if game.number in seen:
                msg = f"Cycle detected at game {game.number}"
                raise MalformedBracketError(msg)
            seen.add(game.number)
            if game.feeders is not None:
                stack.extend(game.feeders)
        unreachable = sorted(set(self._by_number) - seen)
        if unreachable:
            msg = f"Games not connected to the final: {unreachable}"
            raise MalformedBracketError(msg)

    @staticmethod
    def _check_unique_entrants(ordered: list[Game]) -> None:
        placed: dict[str, int] = {}
        for game in ordered:
            for entrant in game.entrants or ():
                if entrant.name in placed:
                    msg = f"Entrant {entrant.name!r} appears in games {placed[entrant.name]} and {game.number}"
                    raise MalformedBracketError(msg)
                placed[entrant.name] = game.number

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def root(self) -> Game:
        """Return the final (championship) game."""
        return self._root

    @property
    def games(self) -> tuple[Game, ...]:
        """Return every game ordered by game number."""
        return self._games

    @property
    def n_rounds(self) -> int:
        """Return the round number of the final."""
        return self._root.round

    @property
    def entrants(self) -> list[Entrant]:
        """Return every entrant in bracket (leaf) order."""
        return self._root.leaf_entrants()

    def game(self, number: int) -> Game:
        """Return the game with the given number.

        Raises:
            KeyError: If no such game exists.
        """
        return self._by_number[number]

    def games_in_round(self, round_num: int) -> list[Game]:
        """Return the games of one round ordered by game number."""
        return [g for g in self._games if g.round == round_num]

    def __iter__(self) -> Iterator[Game]:
        return iter(self._games)

    def __len__(self) -> int:
        return len(self._games)


def _check_shape(game: Game) -> None:
    """Validate the slot counts of a single game."""
    if game.round < 1:
        msg = f"Game {game.number} has invalid round {game.round}"
        raise MalformedBracketError(msg)
    if game.feeders is None:
        if game.entrants is None or len(game.entrants) != 2:
            msg = f"Leaf game {game.number} must hold exactly two entrants"
            raise MalformedBracketError(msg)
        if game.round != 1:
            msg = f"Leaf game {game.number} must be in round 1, got round {game.round}"
            raise MalformedBracketError(msg)
        if game.entrants[0].name == game.entrants[1].name:
            msg = f"Game {game.number} pits {game.entrants[0].name!r} against itself"
            raise MalformedBracketError(msg)
        return
    if game.entrants is not None:
        msg = f"Game {game.number} has both feeder games and direct entrants"
        raise MalformedBracketError(msg)
    if len(game.feeders) != 2:
        msg = f"Game {game.number} must have exactly two feeder games, got {len(game.feeders)}"
        raise MalformedBracketError(msg)
    if game.feeders[0] is game.feeders[1]:
        msg = f"Game {game.number} is fed twice by game {game.feeders[0].number}"
        raise MalformedBracketError(msg)
