"""Wire a GameStore for a local host process."""

import structlog

from shared.logging import setup_logging
from shared.storage import LocalGameStorage
from tally.logic.settings import validate_settings
from tally.server.settings import ScoreKeeperSettings
from tally.session.store import GameStore

logger = structlog.get_logger()


def create_score_keeper(settings: ScoreKeeperSettings | None = None) -> GameStore:
    """Set up logging, open file storage and restore any saved game."""
    if settings is None:
        settings = ScoreKeeperSettings()

    log_path = setup_logging(log_dir=settings.log_dir)
    game_settings = settings.game_settings()
    validate_settings(game_settings)

    store = GameStore(LocalGameStorage(settings.save_path), game_settings)
    store.load()
    logger.info(
        "score keeper ready",
        save_path=settings.save_path,
        log_file=str(log_path) if log_path else None,
        has_game=store.current is not None,
    )
    return store
