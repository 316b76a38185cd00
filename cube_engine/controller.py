"""Command surface used by viewers: create, scramble, solve and tick."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .config import DEFAULT_SETTINGS, CubeSettings
from .history import ScrambleHistory
from .models import CubeState, Move
from .notation import parse_sequence
from .scheduler import MoveCallback, MoveScheduler
from .scramble import generate_scramble
from .store import create_cube, face_states, is_solved

_LOGGER = logging.getLogger(__name__)


class CubeController:
    """Owns the cube state, its history and the move scheduler."""

    def __init__(
        self,
        size: int = 3,
        settings: CubeSettings = DEFAULT_SETTINGS,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self._rng = rng or random.Random()
        self.history = ScrambleHistory()
        self.move_log: List[str] = []
        self.state = create_cube(size, settings)
        self.scheduler = MoveScheduler(self.state, settings)
        self.scheduler.add_move_start_callback(self._log_move)

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def is_busy(self) -> bool:
        return not self.scheduler.is_idle

    @property
    def can_solve(self) -> bool:
        return bool(self.history) and not self.is_busy

    def on_move_start(self, callback: MoveCallback) -> Callable[[], None]:
        return self.scheduler.add_move_start_callback(callback)

    def on_move_end(self, callback: MoveCallback) -> Callable[[], None]:
        return self.scheduler.add_move_end_callback(callback)

    def on_queue_idle(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self.scheduler.add_idle_callback(callback)

    def create_cube(self, size: int) -> CubeState:
        """Replace the cube with a fresh one, dropping queue, history and log."""
        self.state = create_cube(size, self.settings)
        self.history.clear()
        self.move_log.clear()
        self.scheduler.reset(self.state)
        return self.state

    def scramble(self) -> bool:
        if self.is_busy:
            _LOGGER.warning("Scramble rejected: %d moves queued, animating=%s",
                            self.scheduler.queue_length, self.scheduler.is_animating)
            return False
        moves = generate_scramble(self.size, self.settings, self._rng)
        self.history.record(moves)
        self.scheduler.enqueue(moves)
        _LOGGER.info("Scrambling with %d moves", len(moves))
        self.scheduler.drain()
        return True

    def solve(self) -> bool:
        if not self.can_solve:
            _LOGGER.warning("Solve rejected: history=%d, busy=%s", len(self.history), self.is_busy)
            return False
        moves = self.history.compute_solve()
        self.scheduler.enqueue(moves)
        _LOGGER.info("Solving with %d moves", len(moves))
        self.scheduler.drain()
        return True

    def turn(self, move: Move, record: bool = True) -> bool:
        """Queue a single manual turn; rejected while another command runs."""
        if self.is_busy:
            return False
        move.validate(self.size)
        if record:
            self.history.record([move])
        self.scheduler.enqueue([move])
        self.scheduler.drain()
        return True

    def perform(self, algorithm: str, record: bool = True) -> bool:
        """Queue a notation sequence such as ``"R U R' U'"``."""
        if self.is_busy:
            return False
        moves = parse_sequence(algorithm, self.size)
        if record:
            self.history.record(moves)
        self.scheduler.enqueue(moves)
        self.scheduler.drain()
        return True

    def tick(self, delta_time: float) -> None:
        self.scheduler.tick(delta_time)

    async def run_until_idle(self) -> None:
        await self.scheduler.run_until_idle()

    def is_solved(self) -> bool:
        return is_solved(self.state)

    def face_states(self):
        return face_states(self.state)

    def _log_move(self, move: Move, notation: str) -> None:
        self.move_log.append(notation)
