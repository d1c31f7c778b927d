"""
String enum definitions for tally game concepts.
"""

from enum import StrEnum


class GameStatus(StrEnum):
    """Lifecycle status of a game. Transitions only move forward."""

    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class CellRank(StrEnum):
    """Comparative highlight for a score cell or a total."""

    NEUTRAL = "neutral"
    LOWEST = "lowest"
    HIGHEST = "highest"
