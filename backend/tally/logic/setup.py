"""Build the initial game from raw setup input."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from tally.logic.enums import GameStatus
from tally.logic.exceptions import InvalidSetupError
from tally.logic.settings import GameSettings, default_player_name, validate_settings
from tally.logic.state import Game, Player
from tally.logic.state_utils import empty_round


def normalize_player_names(names: Sequence[str], settings: GameSettings) -> list[str]:
    """Strip names and give blank seats their placeholder name."""
    return [name.strip() or default_player_name(settings, seat) for seat, name in enumerate(names, start=1)]


def create_game(
    player_names: Sequence[str],
    location: str = "",
    *,
    today: dt.date | None = None,
    settings: GameSettings | None = None,
) -> Game:
    """
    Create a playing game with one empty round.

    Player ids are 1-based seat numbers. Blank names and a blank location
    fall back to the placeholders from settings.

    Raises:
        InvalidSetupError: If the number of names does not match num_players
        UnsupportedSettingsError: If settings are unusable

    """
    settings = settings or GameSettings()
    validate_settings(settings)

    if len(player_names) != settings.num_players:
        raise InvalidSetupError(f"expected {settings.num_players} player names, got {len(player_names)}")

    names = normalize_player_names(player_names, settings)
    players = tuple(Player(id=seat, name=name) for seat, name in enumerate(names, start=1))
    return Game(
        status=GameStatus.PLAYING,
        location=location.strip() or settings.default_location,
        date=today or dt.datetime.now(tz=dt.UTC).date(),
        players=players,
        rounds=(empty_round(player.id for player in players),),
    )
