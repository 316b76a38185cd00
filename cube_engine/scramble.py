"""Random scramble generation."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .config import DEFAULT_SETTINGS, CubeSettings
from .models import AXES, QUARTER_TURN, Move

_LOGGER = logging.getLogger(__name__)


def generate_scramble(
    n: int,
    settings: CubeSettings = DEFAULT_SETTINGS,
    rng: Optional[random.Random] = None,
    count: Optional[int] = None,
) -> List[Move]:
    """Return a random sequence of quarter turns for an n-cube.

    The length defaults to ``settings.scramble_moves(n)``. With
    ``settings.avoid_axis_repeat`` two consecutive moves never share an axis.
    """
    rng = rng or random.Random()
    count = settings.scramble_moves(n) if count is None else count
    moves: List[Move] = []
    last_axis = None
    for _ in range(count):
        axes = AXES
        if settings.avoid_axis_repeat and last_axis is not None:
            axes = tuple(axis for axis in AXES if axis != last_axis)
        axis = rng.choice(axes)
        last_axis = axis
        moves.append(Move(axis, rng.randrange(n), rng.choice((QUARTER_TURN, -QUARTER_TURN))))
    _LOGGER.debug("Generated %d scramble moves for size %d", len(moves), n)
    return moves
