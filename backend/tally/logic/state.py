"""
Game state models for the tally score keeper.

All models are frozen; transitions build new snapshots with model_copy
(see state_utils) and never mutate an existing one.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, field_validator, model_validator

from tally.logic.enums import GameStatus

# Saves written by the browser version store an absent cell as an empty string.
_LEGACY_ABSENT = ""


def freeze_scores(scores: Mapping[int, int | None]) -> Mapping[int, int | None]:
    """Wrap a score mapping in a read-only view over a private copy."""
    return MappingProxyType(dict(scores))


def _thaw_scores(scores: Mapping[int, int | None]) -> dict[int, int | None]:
    return dict(scores)


ScoreMap = Annotated[
    Mapping[int, int | None],
    AfterValidator(freeze_scores),
    PlainSerializer(_thaw_scores, return_type=dict[int, int | None]),
]


class Player(BaseModel):
    """A seated player. Created at setup and immutable afterwards."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("player name must not be empty")
        return value


class Round(BaseModel):
    """
    One scoring turn.

    Maps player id to a score, or to None when the score has not been
    entered yet. None is distinct from a score of zero. A missing key
    reads as absent too. The mapping is a read-only view, so rounds shared
    between snapshots cannot be changed through any of them.
    """

    model_config = ConfigDict(frozen=True)

    scores: ScoreMap = Field(default_factory=dict, validate_default=True)

    @field_validator("scores", mode="before")
    @classmethod
    def _legacy_absent_to_none(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return {key: None if score == _LEGACY_ABSENT else score for key, score in value.items()}
        return value

    def score_for(self, player_id: int) -> int | None:
        return self.scores.get(player_id)


class Game(BaseModel):
    """
    Canonical record of one game: players, ordered rounds and status.

    Only the last round is open for edits, and only while the game is
    not finished.
    """

    model_config = ConfigDict(frozen=True)

    status: GameStatus = GameStatus.SETUP
    location: str = ""
    date: dt.date
    players: tuple[Player, ...]
    rounds: tuple[Round, ...] = ()

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        if not self.players:
            raise ValueError("game must have at least one player")
        ids = [player.id for player in self.players]
        if len(set(ids)) != len(ids):
            raise ValueError(f"player ids must be unique, got {ids}")
        if self.status != GameStatus.SETUP and not self.rounds:
            raise ValueError(f"game in status {self.status.value!r} must have at least one round")
        return self

    @property
    def player_ids(self) -> list[int]:
        return [player.id for player in self.players]

    @property
    def round_count(self) -> int:
        return len(self.rounds)

    @property
    def open_round_index(self) -> int:
        """Index of the only editable round (-1 before the first round exists)."""
        return len(self.rounds) - 1

    @property
    def is_finished(self) -> bool:
        return self.status == GameStatus.FINISHED

    def get_player(self, player_id: int) -> Player | None:
        for player in self.players:
            if player.id == player_id:
                return player
        return None
