"""
Immutable state update utilities using Pydantic model_copy.

Provides helper functions for the state updates the engine needs on
frozen Pydantic models. These functions never mutate the input state -
they always return new state objects with the requested changes applied.
Rounds that are not touched are shared between the old and new game.
"""

from collections.abc import Iterable

from tally.logic.enums import GameStatus
from tally.logic.state import Game, Round, freeze_scores


def empty_round(player_ids: Iterable[int]) -> Round:
    """
    Return a round with every player's score absent.

    Args:
        player_ids: Ids of the players seated in the game

    Returns:
        New Round with an explicit None for each player

    """
    return Round(scores=dict.fromkeys(player_ids))


def update_round_score(
    round_: Round,
    player_id: int,
    score: int | None,
) -> Round:
    """
    Return new round with one player's score replaced.

    Args:
        round_: Current round
        player_id: Player whose cell changes
        score: New score, or None to clear the cell

    Returns:
        New Round with the cell updated

    """
    scores = dict(round_.scores)
    scores[player_id] = score
    return round_.model_copy(update={"scores": freeze_scores(scores)})


def replace_round(
    game: Game,
    round_index: int,
    round_: Round,
) -> Game:
    """
    Return new game with the round at round_index replaced.

    Args:
        game: Current game
        round_index: Index of the round to replace
        round_: Replacement round

    Returns:
        New Game with the round replaced

    Raises:
        ValueError: If round_index is out of bounds

    """
    if not (0 <= round_index < len(game.rounds)):
        raise ValueError(f"Invalid round index {round_index}, game has {len(game.rounds)} rounds")
    rounds = list(game.rounds)
    rounds[round_index] = round_
    return game.model_copy(update={"rounds": tuple(rounds)})


def append_round(
    game: Game,
    round_: Round,
) -> Game:
    """
    Return new game with a round appended after the existing ones.

    Args:
        game: Current game
        round_: Round to append

    Returns:
        New Game with the round appended

    """
    return game.model_copy(update={"rounds": (*game.rounds, round_)})


def update_status(
    game: Game,
    status: GameStatus,
) -> Game:
    """
    Return new game with the status replaced.

    Args:
        game: Current game
        status: New status

    Returns:
        New Game with the status set

    """
    return game.model_copy(update={"status": status})
