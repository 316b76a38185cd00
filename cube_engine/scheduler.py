"""One-at-a-time move scheduler driven by ticks or by asyncio."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, List, Optional, Set

from .config import DEFAULT_SETTINGS, CubeSettings
from .layers import select_layer
from .models import Cubie, CubeState, Move
from .notation import move_notation
from .rotation import apply_move, ease_in_out_quad

_LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[Move, str], None]


@dataclass
class ActiveTurn:
    """The move currently in flight and the layer it captured at start."""

    move: Move
    notation: str
    layer: List[Cubie]
    duration: float
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    @property
    def angle(self) -> float:
        """Eased angle reached so far, for display only."""
        return self.move.angle * ease_in_out_quad(self.progress)

    @property
    def cubie_ids(self) -> Set[int]:
        return {cubie.id for cubie in self.layer}


class MoveScheduler:
    """FIFO queue of moves with a single in-flight slot."""

    def __init__(self, state: CubeState, settings: CubeSettings = DEFAULT_SETTINGS) -> None:
        self.state = state
        self.settings = settings
        self._queue: Deque[Move] = deque()
        self._active: Optional[ActiveTurn] = None
        self._busy = False
        self.completed_moves = 0
        self.skipped_moves = 0
        self._start_callbacks: List[MoveCallback] = []
        self._end_callbacks: List[MoveCallback] = []
        self._idle_callbacks: List[Callable[[], None]] = []

    @property
    def active(self) -> Optional[ActiveTurn]:
        return self._active

    @property
    def is_animating(self) -> bool:
        return self._active is not None

    @property
    def queue_length(self) -> int:
        return len(self._queue)

    @property
    def is_idle(self) -> bool:
        return self._active is None and not self._queue

    def add_move_start_callback(self, callback: MoveCallback) -> Callable[[], None]:
        """Call ``callback(move, notation)`` whenever a move is dequeued."""
        return _subscribe(self._start_callbacks, callback)

    def add_move_end_callback(self, callback: MoveCallback) -> Callable[[], None]:
        return _subscribe(self._end_callbacks, callback)

    def add_idle_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback()`` once each time the queue runs dry."""
        return _subscribe(self._idle_callbacks, callback)

    def reset(self, state: CubeState) -> None:
        """Drop every pending and in-flight move and adopt a new state.

        Dropping work still ends the busy period, so idle callbacks fire.
        """
        self.state = state
        self._queue.clear()
        self._active = None
        self._signal_idle()

    def enqueue(self, moves: Iterable[Move]) -> None:
        moves = [move.validate(self.state.size) for move in moves]
        self._queue.extend(moves)
        if moves:
            self._busy = True

    def drain(self) -> Optional[ActiveTurn]:
        """Start the next queued move unless one is already in flight.

        Moves whose layer comes back empty are skipped. When nothing is left
        to run the idle callbacks fire once.
        """
        if self._active is not None:
            return None
        while self._queue:
            move = self._queue[0]
            notation = move_notation(move, self.state.size)
            _LOGGER.debug("Starting move %s (%s)", notation, move)
            # the move stays queued until every start callback has returned
            for callback in list(self._start_callbacks):
                callback(move, notation)
            self._queue.popleft()
            layer = select_layer(self.state, move.axis, move.layer_index, self.settings)
            if not layer:
                self.skipped_moves += 1
                _LOGGER.warning("Skipping move %s: no cubies on layer %s%d",
                                notation, move.axis, move.layer_index)
                continue
            self._active = ActiveTurn(move, notation, layer, self.settings.animation_duration)
            return self._active
        self._signal_idle()
        return None

    def tick(self, delta_time: float) -> None:
        """Advance the in-flight move by ``delta_time`` seconds."""
        self.drain()
        if self._active is None:
            return
        self._active.elapsed += delta_time
        if self._active.elapsed >= self._active.duration:
            self._complete()
            self.drain()

    async def run_until_idle(self) -> None:
        """Play the whole queue, sleeping one animation duration per move."""
        while True:
            active = self._active or self.drain()
            if active is None:
                return
            await asyncio.sleep(active.duration)
            if self._active is not active:
                # reset while sleeping
                continue
            active.elapsed = active.duration
            self._complete()

    def _complete(self) -> None:
        active = self._active
        apply_move(self.state, active.move, active.layer, self.settings)
        self._active = None
        self.completed_moves += 1
        _LOGGER.debug("Finished move %s", active.notation)
        for callback in list(self._end_callbacks):
            callback(active.move, active.notation)

    def _signal_idle(self) -> None:
        if not self._busy:
            return
        self._busy = False
        _LOGGER.info("Animation queue complete")
        for callback in list(self._idle_callbacks):
            callback()


def _subscribe(callbacks: list, callback) -> Callable[[], None]:
    callbacks.append(callback)

    def unsubscribe() -> None:
        if callback in callbacks:
            callbacks.remove(callback)

    return unsubscribe
