"""
Totals, ranking and comparative highlighting for a tally game.

Fewest points wins. A tie is global: every player must share the same
total for the game to count as tied, so two players sharing the lowest
total while others differ is not a tie.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, NamedTuple

from tally.logic.enums import CellRank

if TYPE_CHECKING:
    from tally.logic.state import Game

# minimum number of entered scores in a round before cells are compared
MIN_SCORES_TO_COMPARE = 2


class RankingSummary(NamedTuple):
    """Spread of player totals across the whole game."""

    min_total: int
    max_total: int
    is_tie: bool


def compute_totals(game: Game) -> dict[int, int]:
    """
    Sum each player's scores across all rounds.

    Absent cells count as zero. The result does not depend on round order.
    """
    totals = dict.fromkeys(game.player_ids, 0)
    for round_ in game.rounds:
        for player_id in totals:
            totals[player_id] += round_.score_for(player_id) or 0
    return totals


def ranking_summary(totals: Mapping[int, int]) -> RankingSummary:
    """
    Compute lowest and highest totals and whether all totals are equal.

    With no players at all the summary is (0, 0, tie).
    """
    values = list(totals.values())
    if not values:
        return RankingSummary(min_total=0, max_total=0, is_tie=True)
    return RankingSummary(
        min_total=min(values),
        max_total=max(values),
        is_tie=len(set(values)) == 1,
    )


def winner_ids(game: Game, totals: Mapping[int, int]) -> list[int]:
    """
    Return ids of the winners in seat order.

    Winners exist only once the game is finished and not globally tied;
    every player holding the lowest total wins.
    """
    if not game.is_finished:
        return []
    summary = ranking_summary(totals)
    if summary.is_tie:
        return []
    return [player_id for player_id in game.player_ids if totals.get(player_id) == summary.min_total]


def classify_total(total: int, summary: RankingSummary) -> CellRank:
    """Highlight a player's total against the game-wide spread."""
    if summary.is_tie:
        return CellRank.NEUTRAL
    if total == summary.min_total:
        return CellRank.LOWEST
    if total == summary.max_total:
        return CellRank.HIGHEST
    return CellRank.NEUTRAL


def classify_cell(score: int | None, scores_in_round: Iterable[int | None]) -> CellRank:
    """
    Highlight one score against the other scores of the same round.

    Only entered scores take part. Nothing is highlighted while fewer than
    two scores are entered or when all entered scores are equal. Every cell
    matching the round minimum is LOWEST and every cell matching the
    maximum is HIGHEST.
    """
    present = [value for value in scores_in_round if value is not None]
    if score is None or len(present) < MIN_SCORES_TO_COMPARE:
        return CellRank.NEUTRAL

    lowest = min(present)
    highest = max(present)
    if lowest == highest:
        return CellRank.NEUTRAL
    if score == lowest:
        return CellRank.LOWEST
    if score == highest:
        return CellRank.HIGHEST
    return CellRank.NEUTRAL


def classify_round(game: Game, round_index: int) -> dict[int, CellRank]:
    """Classify every player's cell in the round at round_index."""
    round_ = game.rounds[round_index]
    scores = [round_.score_for(player_id) for player_id in game.player_ids]
    return {
        player_id: classify_cell(score, scores) for player_id, score in zip(game.player_ids, scores, strict=True)
    }
