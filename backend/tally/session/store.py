"""Holder of the single current game, with persistence injected.

The store is the only place that keeps a mutable reference to the game.
It runs engine transitions, saves every accepted change, and converts
rule violations into ActionResult values so the host can show them.
"""

from collections.abc import Callable
from typing import NamedTuple

import structlog

from shared.storage import GameStorage
from tally.logic.codec import decode_game, encode_game
from tally.logic.engine import add_round, finish_game, set_score, start_game
from tally.logic.enums import GameStatus
from tally.logic.exceptions import CorruptGameStateError, NoActiveGameError, TallyRuleError
from tally.logic.milestones import is_round_milestone
from tally.logic.scoring import compute_totals
from tally.logic.settings import GameSettings
from tally.logic.state import Game
from tally.logic.summary import render_summary

logger = structlog.get_logger()

MilestoneListener = Callable[[int], None]


class ActionResult(NamedTuple):
    """
    Outcome of a store action.

    On success game is the new snapshot (already saved) and error is None.
    On a rule violation game is the unchanged snapshot and error holds the
    reason.
    """

    game: Game
    error: TallyRuleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GameStore:
    """Own the current game and its persistence for one host."""

    def __init__(self, storage: GameStorage, settings: GameSettings | None = None) -> None:
        self._storage = storage
        self._settings = settings or GameSettings()
        self._game: Game | None = None
        self._milestone_listeners: list[MilestoneListener] = []

    @property
    def current(self) -> Game | None:
        return self._game

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def add_milestone_listener(self, listener: MilestoneListener) -> None:
        """Register a callback invoked with the new round count on each milestone."""
        self._milestone_listeners.append(listener)

    def load(self) -> Game | None:
        """Restore the saved game. Unreadable or corrupt saves count as no game."""
        try:
            content = self._storage.load()
        except (OSError, UnicodeDecodeError):
            logger.warning("could not read saved game", exc_info=True)
            content = None

        game = None
        if content is not None:
            try:
                game = decode_game(content)
            except CorruptGameStateError as exc:
                logger.warning("discarding corrupt saved game", reason=str(exc))

        self._game = game
        if game is not None:
            logger.info("restored saved game", status=game.status, rounds=game.round_count)
        return game

    def start(self, game: Game) -> Game:
        """Replace any current game with a new one and save it.

        A game still in setup is started here, which opens its first round.
        """
        if game.status == GameStatus.SETUP:
            game = start_game(game)
        self._save(game)
        logger.info("game started", players=len(game.players), location=game.location)
        return game

    def set_score(self, round_index: int, player_id: int, raw_input: str | int | None) -> ActionResult:
        return self._apply(
            "set_score",
            lambda game: set_score(game, round_index, player_id, raw_input),
        )

    def add_round(self) -> ActionResult:
        return self._apply("add_round", add_round)

    def finish(self) -> ActionResult:
        return self._apply("finish_game", finish_game)

    def new_game(self) -> None:
        """Discard the current game and its saved copy."""
        self._storage.clear()
        self._game = None
        logger.info("game discarded for a new game")

    def totals(self) -> dict[int, int]:
        return compute_totals(self._require_game())

    def summary(self) -> str:
        """Render the share text for the current game."""
        game = self._require_game()
        return render_summary(game, compute_totals(game), self._settings)

    def _require_game(self) -> Game:
        if self._game is None:
            raise NoActiveGameError("no game in progress")
        return self._game

    def _apply(self, action: str, transition: Callable[[Game], Game]) -> ActionResult:
        game = self._require_game()
        try:
            updated = transition(game)
        except TallyRuleError as exc:
            logger.warning("action rejected", action=action, error_type=type(exc).__name__, reason=str(exc))
            return ActionResult(game=game, error=exc)

        if updated is not game:
            self._save(updated)
            self._notify_milestone(game.round_count, updated.round_count)
        return ActionResult(game=updated)

    def _save(self, game: Game) -> None:
        self._storage.save(encode_game(game))
        self._game = game

    def _notify_milestone(self, previous_count: int, current_count: int) -> None:
        if not is_round_milestone(previous_count, current_count, self._settings.milestone_interval):
            return
        logger.info("round milestone reached", rounds=current_count)
        for listener in self._milestone_listeners:
            try:
                listener(current_count)
            except Exception:
                # host feedback (e.g. a sound) must not interrupt scoring
                logger.exception("milestone listener failed", rounds=current_count)
