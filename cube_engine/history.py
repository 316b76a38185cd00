"""Record of turns applied since the cube was last solved."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .models import Move

_LOGGER = logging.getLogger(__name__)


class ScrambleHistory:
    """Ordered record of issued moves and their exact inverse."""

    def __init__(self) -> None:
        self._moves: List[Move] = []

    def __len__(self) -> int:
        return len(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)

    @property
    def moves(self) -> List[Move]:
        return list(self._moves)

    def record(self, moves: Iterable[Move]) -> None:
        self._moves.extend(moves)

    def clear(self) -> None:
        self._moves.clear()

    def compute_solve(self) -> List[Move]:
        """Return the inverse sequence and clear the history.

        The last recorded move is undone first, each with its angle negated.
        """
        solution = [move.inverse() for move in reversed(self._moves)]
        _LOGGER.debug("Computed %d solve moves", len(solution))
        self._moves.clear()
        return solution
