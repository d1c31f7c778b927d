"""Shareable plain-text result summary."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from tally.logic.settings import GameSettings

if TYPE_CHECKING:
    from tally.logic.state import Game, Player


def rank_players(game: Game, totals: Mapping[int, int]) -> list[Player]:
    """Players sorted by total, lowest first; equal totals keep seat order."""
    return sorted(game.players, key=lambda player: totals[player.id])


def render_summary(game: Game, totals: Mapping[int, int], settings: GameSettings | None = None) -> str:
    """
    Render the final scores as chat-friendly text.

    Header with date and location, then one numbered line per player from
    lowest total to highest. Rank 1 carries the winner label. The text
    always ends with the closing line.
    """
    settings = settings or GameSettings()

    lines = [
        f"*{settings.summary_title}*",
        f"*Date:* {game.date.isoformat()}",
        f"*Location:* {game.location}",
        "",
        "*Final Scores:*",
    ]
    for rank, player in enumerate(rank_players(game, totals), start=1):
        line = f"{rank}. *{player.name}:* {totals[player.id]}"
        if rank == 1:
            line += f" ({settings.winner_label})"
        lines.append(line)
    lines.extend(("", settings.closing_line))
    return "\n".join(lines)
