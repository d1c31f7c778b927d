"""Test state builders for tally games."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from tally.logic.enums import GameStatus
from tally.logic.state import Game, Player, Round

if TYPE_CHECKING:
    from collections.abc import Sequence

GAME_DATE = dt.date(2024, 5, 17)


def create_players(count: int = 4, names: Sequence[str] | None = None) -> tuple[Player, ...]:
    """Create players with 1-based ids and simple names."""
    if names is None:
        names = [f"P{seat}" for seat in range(1, count + 1)]
    return tuple(Player(id=seat, name=name) for seat, name in enumerate(names, start=1))


def create_round(*scores: int | None, player_ids: Sequence[int] | None = None) -> Round:
    """Create a round from scores given in seat order."""
    if player_ids is None:
        player_ids = range(1, len(scores) + 1)
    return Round(scores=dict(zip(player_ids, scores, strict=True)))


def create_game(
    rounds: Sequence[Sequence[int | None]] | None = None,
    *,
    players: Sequence[Player] | None = None,
    status: GameStatus = GameStatus.PLAYING,
    location: str = "Home",
    date: dt.date = GAME_DATE,
) -> Game:
    """Create a Game from per-round score rows given in seat order.

    Without rounds, a single empty round is created.
    """
    if players is None:
        players = create_players()
    player_ids = [player.id for player in players]
    if rounds is None:
        rounds = [[None] * len(players)]
    return Game(
        status=status,
        location=location,
        date=date,
        players=tuple(players),
        rounds=tuple(create_round(*row, player_ids=player_ids) for row in rounds),
    )
