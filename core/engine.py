"""
core/engine.py — Round state machine for Chroma Vision.

RoundEngine owns every piece of game state and is driven by four inputs:

States:
    IDLE      — before the first game, or after the info button
    PLAYING   — a round is on screen and the countdown is running
    GAMEOVER  — the countdown hit zero; frozen until the next start

Transitions:
    IDLE/GAMEOVER → PLAYING  : start()
    PLAYING       → PLAYING  : select() correct  (+1 score, +2 s, next level)
    PLAYING       → PLAYING  : select() wrong    (−3 s, same round)
    PLAYING       → PLAYING  : tick(dt) with time to spare
    PLAYING       → GAMEOVER : tick(dt) that exhausts the clock
    any           → IDLE     : show_idle()

The engine is pure: it never schedules anything. Something outside
(core/timer.py via core/game.py) calls tick() at a fixed cadence while the
status is PLAYING. Every operation returns the resulting Session snapshot.
"""

from __future__ import annotations
import logging
from dataclasses import replace

from core.generator import LevelGenerator
from core.session import Round, Session, Status
from settings import GRID_CELLS, MAX_TIME_S, CORRECT_BONUS_S, WRONG_PENALTY_S

logger = logging.getLogger(__name__)


class RoundEngine:
    """State machine for one player's sessions.

    Attributes:
        generator: LevelGenerator used for every new round.
        _session:  The current immutable Session. Replaced, never mutated.
    """

    def __init__(self, generator: LevelGenerator | None = None) -> None:
        """Initialise an idle engine with no round yet.

        Args:
            generator: Level generator to use. Pass one built around a
                       seeded random.Random for reproducible games.
        """
        self.generator: LevelGenerator = generator or LevelGenerator()
        self._session:  Session        = Session()

    # ── Commands ──────────────────────────────────────────────────────────────

    def start(self) -> Session:
        """Begin a new game, replacing whatever session came before."""
        self._session = Session(
            status=Status.PLAYING,
            score=0,
            time_left=MAX_TIME_S,
            round=self._new_round(0),
        )
        logger.info("Game started")
        return self._session

    def show_idle(self) -> Session:
        """Force the status to IDLE, keeping score, time and round as they are."""
        if self._session.status is not Status.IDLE:
            logger.info(f"Returning to idle from {self._session.status.value}")
        self._session = replace(self._session, status=Status.IDLE)
        return self._session

    def _new_round(self, level: int) -> Round:
        rnd = self.generator.generate(level)
        logger.debug(
            f"Level {level}: base {rnd.base_color.to_css()}, "
            f"target {rnd.target_color.to_css()} at cell {rnd.target_index}"
        )
        return rnd

    # ── Events ────────────────────────────────────────────────────────────────

    def select(self, index: int) -> Session:
        """Judge a pick of grid cell `index`.

        Ignored unless PLAYING. A correct pick scores, adds bonus time and
        moves to the next level in one step. Anything else, including an
        index outside the grid, costs time and keeps the round.

        Args:
            index: Cell index in [0, GRID_SIZE**2).
        """
        session = self._session
        if session.status is not Status.PLAYING or session.round is None:
            return session

        if _in_grid(index) and index == session.round.target_index:
            next_level = session.round.level + 1
            self._session = replace(
                session,
                score=session.score + 1,
                time_left=min(MAX_TIME_S, session.time_left + CORRECT_BONUS_S),
                round=self._new_round(next_level),
            )
            logger.debug(f"Correct pick {index}, advancing to level {next_level}")
        else:
            self._session = replace(
                session,
                time_left=max(0.0, session.time_left - WRONG_PENALTY_S),
            )
            logger.debug(f"Wrong pick {index!r}, {self._session.time_left:.1f}s left")
        return self._session

    def tick(self, delta_seconds: float) -> Session:
        """Run the countdown forward by delta_seconds.

        No-op unless PLAYING or when delta_seconds is not positive. Reaching
        zero ends the game with time_left exactly 0.
        """
        session = self._session
        if session.status is not Status.PLAYING or not delta_seconds > 0:
            return session

        remaining = session.time_left - delta_seconds
        if remaining > 0:
            self._session = replace(session, time_left=remaining)
        else:
            self._session = replace(session, status=Status.GAMEOVER, time_left=0.0)
            logger.info(
                f"Game over at level {session.level} with score {session.score} "
                f"({self._session.accuracy()}% accuracy)"
            )
        return self._session

    # ── Reads ─────────────────────────────────────────────────────────────────

    def current_session(self) -> Session:
        """Return the current snapshot without changing anything."""
        return self._session

    @property
    def status(self) -> Status:
        """Shortcut for current_session().status."""
        return self._session.status


def _in_grid(index) -> bool:
    # bool is an int subclass; True must not stand in for cell 1
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < GRID_CELLS
    )
