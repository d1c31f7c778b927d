"""
JSON text form of a Game for persistence.

Player ids become JSON object keys (strings) and are validated back into
integers on decode. Absent scores are written as null, so they stay
distinct from a literal 0.
"""

from pydantic import ValidationError

from tally.logic.exceptions import CorruptGameStateError
from tally.logic.state import Game


def encode_game(game: Game) -> str:
    return game.model_dump_json()


def decode_game(text: str | bytes) -> Game:
    """
    Parse and validate persisted game text.

    Raises:
        CorruptGameStateError: If the text is not valid JSON or breaks a
            game invariant

    """
    try:
        return Game.model_validate_json(text)
    except ValidationError as exc:
        raise CorruptGameStateError(f"stored game is invalid: {exc.error_count()} validation error(s)") from exc
