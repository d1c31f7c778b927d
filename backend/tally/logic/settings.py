"""Centralized game settings for the tally score keeper."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tally.logic.exceptions import UnsupportedSettingsError

PLAYER_NUMBER_PLACEHOLDER = "{n}"


class GameSettings(BaseModel):
    """
    Configuration for game setup, milestones and the share summary.

    All fields have default values matching the four-player domino table.
    """

    model_config = ConfigDict(frozen=True)

    # --- Setup ---
    num_players: int = 4
    player_name_template: str = "Player {n}"
    default_location: str = "Unknown Location"

    # --- Milestones ---
    milestone_interval: int = 10  # 0 disables milestone notifications

    # --- Share Summary ---
    summary_title: str = "Domino Game Results"
    winner_label: str = "Winner \N{TROPHY}"
    closing_line: str = "Thanks for playing!"


def validate_settings(settings: GameSettings) -> None:
    """Validate that all settings values are usable by the engine.

    Raises UnsupportedSettingsError listing every problem found.
    """
    errors: list[str] = []

    if settings.num_players < 1:
        errors.append(f"num_players={settings.num_players} is not supported (at least one player required)")

    if PLAYER_NUMBER_PLACEHOLDER not in settings.player_name_template:
        errors.append(f"player_name_template={settings.player_name_template!r} must contain {{n}}")

    if not settings.default_location.strip():
        errors.append("default_location must not be empty")

    if settings.milestone_interval < 0:
        errors.append(f"milestone_interval={settings.milestone_interval} must be >= 0")

    if errors:
        raise UnsupportedSettingsError("; ".join(errors))


def default_player_name(settings: GameSettings, seat_number: int) -> str:
    """Placeholder name for a 1-based seat left blank at setup."""
    return settings.player_name_template.replace(PLAYER_NUMBER_PLACEHOLDER, str(seat_number))
