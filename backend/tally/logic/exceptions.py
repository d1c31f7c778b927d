"""Typed domain exceptions for scoring rule violations.

All engine-level rule violations use subclasses of TallyRuleError
rather than raw ValueError. The engine raises them; the GameStore
boundary catches them and hands the unchanged game back to the host
together with the error.
"""


class TallyRuleError(Exception):
    """Base exception for recoverable scoring rule violations."""


class InvalidEditError(TallyRuleError):
    """Edit targets a frozen round, a finished game, or an unknown player."""


class InvalidScoreFormatError(TallyRuleError):
    """Score input is neither empty nor an integer.

    Attributes:
        raw_input: The rejected input value.

    """

    def __init__(self, raw_input: object) -> None:
        self.raw_input = raw_input
        super().__init__(f"score input {raw_input!r} is not an integer")


class GameFinishedError(TallyRuleError):
    """Round cannot be added because the game is finished."""


class InvalidSetupError(TallyRuleError):
    """Setup input cannot produce a valid game."""


class UnsupportedSettingsError(TallyRuleError):
    """Game settings contain values the engine cannot work with."""


class NoActiveGameError(Exception):
    """Raised when the store is asked to act but holds no game."""


class CorruptGameStateError(Exception):
    """Persisted game text could not be decoded into a valid game."""
