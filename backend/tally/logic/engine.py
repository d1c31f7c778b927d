"""
Game state transitions: score edits and the round lifecycle.

Every function takes a Game snapshot and returns a new one. Invalid
actions raise a TallyRuleError subclass and leave the input untouched.
"""

import re

from tally.logic.enums import GameStatus
from tally.logic.exceptions import GameFinishedError, InvalidEditError, InvalidScoreFormatError
from tally.logic.state import Game
from tally.logic.state_utils import append_round, empty_round, replace_round, update_round_score, update_status

# optional sign followed by ASCII digits only; rejects "1.5", "1e3" and "1_000"
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_score_input(raw_input: str | int | None) -> int | None:
    """
    Convert raw score input into a score value.

    Empty or whitespace-only text and None clear the cell (return None).
    Integers pass through unchanged.

    Raises:
        InvalidScoreFormatError: If the input is not an integer

    """
    if raw_input is None:
        return None
    if isinstance(raw_input, bool):
        raise InvalidScoreFormatError(raw_input)
    if isinstance(raw_input, int):
        return raw_input
    if not isinstance(raw_input, str):
        raise InvalidScoreFormatError(raw_input)

    text = raw_input.strip()
    if not text:
        return None
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidScoreFormatError(raw_input)
    return int(text)


def _check_editable(game: Game, round_index: int, player_id: int) -> None:
    if round_index != game.open_round_index:
        raise InvalidEditError(
            f"round {round_index} is frozen, only round {game.open_round_index} can be edited",
        )
    if game.is_finished:
        raise InvalidEditError("game is finished, scores can no longer change")
    if game.status == GameStatus.SETUP:
        raise InvalidEditError("game has not started yet")
    if game.get_player(player_id) is None:
        raise InvalidEditError(f"player {player_id} is not part of this game")


def set_score(game: Game, round_index: int, player_id: int, raw_input: str | int | None) -> Game:
    """
    Record a score (or clear it) in the open round.

    Only the last round of a game that is not finished can be edited. The
    edit is checked before the input is parsed, so a frozen round always
    reports InvalidEditError.

    Raises:
        InvalidEditError: If the round is frozen, the game is not playing,
            or the player is unknown
        InvalidScoreFormatError: If raw_input is not empty and not an integer

    """
    _check_editable(game, round_index, player_id)
    score = parse_score_input(raw_input)
    round_ = update_round_score(game.rounds[round_index], player_id, score)
    return replace_round(game, round_index, round_)


def add_round(game: Game) -> Game:
    """
    Append a round with every score absent.

    Raises:
        GameFinishedError: If the game is finished
        InvalidEditError: If the game has not started yet

    """
    if game.is_finished:
        raise GameFinishedError("cannot add a round to a finished game")
    if game.status == GameStatus.SETUP:
        raise InvalidEditError("game has not started yet")
    return append_round(game, empty_round(game.player_ids))


def start_game(game: Game) -> Game:
    """
    Move a game out of setup and open its first round.

    Raises:
        InvalidEditError: If the game is already playing or finished

    """
    if game.status != GameStatus.SETUP:
        raise InvalidEditError(f"game already started (status={game.status.value})")
    started = update_status(game, GameStatus.PLAYING)
    return append_round(started, empty_round(game.player_ids))


def finish_game(game: Game) -> Game:
    """
    Mark the game finished. Finishing a finished game returns it unchanged.

    Raises:
        InvalidEditError: If the game is still in setup

    """
    if game.is_finished:
        return game
    if game.status == GameStatus.SETUP:
        raise InvalidEditError("cannot finish a game that has not started")
    return update_status(game, GameStatus.FINISHED)
