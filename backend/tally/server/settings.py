"""Score keeper host configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

from tally.logic.settings import GameSettings


class ScoreKeeperSettings(BaseSettings):
    model_config = {"env_prefix": "TALLY_"}

    save_path: str = Field(default="backend/data/current_game.json", min_length=1)
    log_dir: str | None = None
    num_players: int = Field(default=4, ge=1)
    milestone_interval: int = Field(default=10, ge=0)
    default_location: str = Field(default="Unknown Location", min_length=1)

    def game_settings(self) -> GameSettings:
        """Build the engine settings this host runs with."""
        return GameSettings(
            num_players=self.num_players,
            milestone_interval=self.milestone_interval,
            default_location=self.default_location,
        )
