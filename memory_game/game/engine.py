"""Game engine for the memory game."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any, Callable

from memory_game.config import Config
from memory_game.logging import GameLogger
from memory_game.models.difficulty import Difficulty, GameMode, get_profile
from memory_game.models.score import BestScoreEntry, BestScoreTable
from memory_game.models.session import GameOutcome, GameSession, Phase

from .deck import build_deck
from .events import EventType, GameEvent, Notification
from .scheduler import Scheduler, TimerHandle
from .scoring import calculate_score
from .snapshot import CardView, GameSnapshot

if TYPE_CHECKING:
    from memory_game.storage import BestScoreRepository

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]


class GameEngine:
    """State machine of a single-player memory game.

    Phases run setup -> preview -> playing -> finished. The host calls
    start_game / flip_card / return_to_setup and renders snapshot().
    Timed transitions go through the injected scheduler and are bound to
    the session that scheduled them: replacing or ending a session cancels
    them, and a late callback for an old session does nothing.

    Invalid or out-of-phase actions are ignored, never raised.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        repository: BestScoreRepository | None = None,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            scheduler: Source of delayed callbacks.
            repository: Best score storage. Scores are kept in memory only
                if not provided.
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for the event log
            rng: Random source for shuffling
        """
        self.scheduler = scheduler
        self.repository = repository
        self.config = config or Config()
        self.timing = self.config.timing
        self.game_logger = game_logger
        self.rng = rng

        self.session = GameSession()
        self.notification: Notification | None = None
        self._best_scores = repository.load() if repository else BestScoreTable()
        self._timers: list[TimerHandle] = []
        self._listeners: list[Listener] = []

    @property
    def phase(self) -> Phase:
        """Current phase."""
        return self.session.phase

    # === subscriptions ===

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called on every state change.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, session: GameSession, event_type: EventType, **payload: Any) -> None:
        event = GameEvent(type=event_type, session_id=session.session_id, payload=payload)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Listener failed on {event_type.value}")

    # === timers ===

    def _schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        session_id = self.session.session_id
        handle: TimerHandle | None = None

        def fire() -> None:
            self._timers = [t for t in self._timers if t is not handle]
            if self.session.session_id != session_id:
                logger.debug(f"Dropping timer of stale session {session_id[:8]}")
                return
            callback()

        handle = self.scheduler.call_later(delay_ms, fire)
        self._timers.append(handle)

    def _cancel_timers(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()

    def pending_timers(self) -> int:
        """Get number of outstanding timed transitions."""
        return len(self._timers)

    # === setup ===

    def _resolve_choice(
        self,
        mode: GameMode | str | None,
        difficulty: Difficulty | str | None,
    ) -> tuple[GameMode, Difficulty] | None:
        try:
            return (
                GameMode(mode) if mode is not None else self.session.mode,
                Difficulty(difficulty) if difficulty is not None else self.session.difficulty,
            )
        except ValueError:
            logger.warning(f"Ignoring unknown mode/difficulty: {mode!r}, {difficulty!r}")
            return None

    def select(
        self,
        mode: GameMode | str | None = None,
        difficulty: Difficulty | str | None = None,
    ) -> None:
        """Change the mode or difficulty used by the next start_game.

        Ignored outside the setup phase or for unknown values.
        """
        if self.session.phase != Phase.SETUP:
            logger.debug("Ignoring selection outside setup")
            return
        choice = self._resolve_choice(mode, difficulty)
        if choice:
            self.session.mode, self.session.difficulty = choice

    def start_game(
        self,
        mode: GameMode | str | None = None,
        difficulty: Difficulty | str | None = None,
    ) -> GameSession:
        """Start a new game, replacing the current session.

        Unknown mode or difficulty values leave the current session as is.

        Args:
            mode: Game mode (current selection if not provided)
            difficulty: Difficulty tier (current selection if not provided)

        Returns:
            The new session in preview phase, or the unchanged current
            session if the choice was invalid.
        """
        choice = self._resolve_choice(mode, difficulty)
        if choice is None:
            return self.session
        mode, difficulty = choice
        self._cancel_timers()

        profile = get_profile(difficulty)
        deck = build_deck(difficulty, self.rng)
        self.session = GameSession(
            mode=mode,
            difficulty=difficulty,
            phase=Phase.PREVIEW,
            deck=deck,
            flipped_indices=list(range(len(deck))),  # Reveal all
            time_remaining=profile.time_limit if mode == GameMode.CHRONO else 0,
        )
        self.notification = None
        session = self.session
        self._schedule(self.timing.preview_ms, self._end_preview)

        logger.info(f"Game started: {session}")
        if self.game_logger:
            self.game_logger.log_game_start(session)
        self._emit(session, EventType.GAME_STARTED, mode=mode.value, difficulty=difficulty.value)
        return session

    def replay(self) -> GameSession:
        """Start a new game with the same mode and difficulty."""
        return self.start_game(self.session.mode, self.session.difficulty)

    def return_to_setup(self) -> None:
        """Drop the current session and go back to setup."""
        self._cancel_timers()
        self.session = GameSession(
            mode=self.session.mode, difficulty=self.session.difficulty
        )
        self.notification = None
        logger.debug("Returned to setup")
        self._emit(self.session, EventType.RETURNED_TO_SETUP)

    # Transitions below finish every state change of their session before
    # notifying listeners, since a listener may replace the session.

    def _end_preview(self) -> None:
        session = self.session
        if session.phase != Phase.PREVIEW:
            return
        session.flipped_indices = []
        session.phase = Phase.PLAYING
        if session.mode == GameMode.CHRONO:
            self._schedule(self.timing.tick_ms, self._tick)

        self._emit(session, EventType.PLAY_STARTED)

    # === play ===

    def flip_card(self, index: int) -> bool:
        """Turn a card face up.

        Ignored unless playing, and when a match check is pending, the
        card is matched or already flipped, or two cards are already up.

        Args:
            index: Deck position.

        Returns:
            True if the card was flipped.
        """
        session = self.session
        if session.phase != Phase.PLAYING:
            logger.debug(f"Ignoring flip of {index} during {session.phase.value}")
            return False
        if (
            session.is_checking
            or not 0 <= index < len(session.deck)
            or session.deck[index].is_matched
            or index in session.flipped_indices
            or len(session.flipped_indices) >= 2
        ):
            logger.debug(f"Ignoring flip of {index}")
            return False

        session.flipped_indices.append(index)
        if self.game_logger:
            self.game_logger.log_flip(session, index)

        if len(session.flipped_indices) == 2:
            session.is_checking = True
            first, second = session.flipped_indices
            if session.deck[first].matches(session.deck[second]):
                self._schedule(
                    self.timing.match_delay_ms,
                    lambda: self._confirm_match(first, second),
                )
            else:
                self._schedule(
                    self.timing.mismatch_delay_ms,
                    lambda: self._hide_mismatch(first, second),
                )

        self._emit(session, EventType.CARD_FLIPPED, index=index)
        return True

    def _confirm_match(self, first: int, second: int) -> None:
        session = self.session
        if session.phase != Phase.PLAYING:
            return
        session.deck[first].is_matched = True
        session.deck[second].is_matched = True
        session.flipped_indices = []
        session.matched_pair_count += 1
        session.is_checking = False

        logger.debug(
            f"Pair found ({session.matched_pair_count}/{session.total_pairs})"
        )
        if self.game_logger:
            self.game_logger.log_check(session, [first, second], matched=True)
        won = session.all_matched()
        is_best = self._end_game(session, GameOutcome.WIN) if won else False

        self._emit(
            session,
            EventType.PAIR_MATCHED,
            indices=[first, second],
            matched_pairs=session.matched_pair_count,
        )
        if won:
            self._announce_end(session, is_best)

    def _hide_mismatch(self, first: int, second: int) -> None:
        session = self.session
        if session.phase != Phase.PLAYING:
            return
        session.flipped_indices = []
        session.is_checking = False

        if self.game_logger:
            self.game_logger.log_check(session, [first, second], matched=False)
        self._emit(session, EventType.PAIR_MISMATCHED, indices=[first, second])

    def _tick(self) -> None:
        session = self.session
        if session.phase != Phase.PLAYING or session.mode != GameMode.CHRONO:
            return
        ticked = session.time_remaining > 0
        if ticked:
            session.time_remaining -= 1

        lost = session.time_remaining <= 0
        is_best = self._end_game(session, GameOutcome.LOSS) if lost else False
        if not lost:
            self._schedule(self.timing.tick_ms, self._tick)

        if ticked:
            self._emit(session, EventType.TICK, time_remaining=session.time_remaining)
        if lost:
            self._announce_end(session, is_best)

    # === end of game ===

    def _end_game(self, session: GameSession, outcome: GameOutcome) -> bool:
        """Close a session: score it, record the best score, set the notification.

        Returns:
            True if the best score table changed.
        """
        self._cancel_timers()  # Freezes the clock, drops a pending check
        session.phase = Phase.FINISHED
        session.is_checking = False
        session.time_remaining = max(0, min(session.time_remaining, session.time_limit))

        score = calculate_score(
            session.mode,
            session.difficulty,
            session.matched_pair_count,
            session.time_remaining,
        )
        session.final_score = score
        session.outcome = outcome

        entry = BestScoreEntry(
            mode=session.mode,
            difficulty=session.difficulty,
            score=score,
            time=session.time_remaining if session.mode == GameMode.CHRONO else None,
        )
        is_best = self._best_scores.record(entry)
        if is_best:
            logger.info(f"New best score: {entry}")
            if self.repository:
                self.repository.save(self._best_scores)

        logger.info(f"Game {outcome.value}: {session}, score {score}")
        if self.game_logger:
            self.game_logger.log_game_end(session, outcome, score, is_best)

        self.notification = Notification.for_outcome(outcome)
        return is_best

    def _announce_end(self, session: GameSession, is_best: bool) -> None:
        # Stop once a listener has moved on to another session
        if self.session is not session:
            return
        if is_best:
            self._emit(session, EventType.BEST_SCORE_UPDATED, score=session.final_score)
            if self.session is not session:
                return

        outcome = session.outcome
        event_type = EventType.GAME_WON if outcome == GameOutcome.WIN else EventType.GAME_LOST
        notification = Notification.for_outcome(outcome)
        self._emit(
            session, event_type, score=session.final_score, message=notification.message
        )

    # === state for rendering ===

    def live_score(self) -> int:
        """Score of the current session so far."""
        session = self.session
        if not session.deck:
            return 0
        time_remaining = max(0, min(session.time_remaining, session.time_limit))
        return calculate_score(
            session.mode,
            session.difficulty,
            session.matched_pair_count,
            time_remaining,
        )

    def best_scores(self) -> list[BestScoreEntry]:
        """Best scores in display order."""
        return self._best_scores.to_list()

    def best_score(
        self, mode: GameMode | str, difficulty: Difficulty | str
    ) -> BestScoreEntry | None:
        """Best score for one mode and difficulty."""
        return self._best_scores.get(mode, difficulty)

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the current state."""
        session = self.session
        cards = [
            CardView(
                index=i,
                id=card.id,
                symbol=card.symbol,
                color=card.color,
                is_matched=card.is_matched,
                is_flipped=session.is_flipped(i),
            )
            for i, card in enumerate(session.deck)
        ]
        return GameSnapshot(
            session_id=session.session_id,
            phase=session.phase,
            mode=session.mode,
            difficulty=session.difficulty,
            cards=cards,
            matched_pairs=session.matched_pair_count,
            total_pairs=session.total_pairs,
            time_remaining=(
                session.time_remaining if session.mode == GameMode.CHRONO else None
            ),
            live_score=self.live_score(),
            final_score=session.final_score,
            is_checking=session.is_checking,
            best_scores=self.best_scores(),
            notification=self.notification,
        )
