"""Rotation of a layer about the cube center, with grid snapping."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

import numpy as np

from .config import DEFAULT_SETTINGS, CubeSettings
from .layers import select_layer
from .models import AXIS_INDEX, Cubie, CubeState, Move

_LOGGER = logging.getLogger(__name__)


def rotation_matrix(axis: str, angle: float) -> np.ndarray:
    """Right-handed rotation matrix about a coordinate axis."""
    c, s = math.cos(angle), math.sin(angle)
    if axis == "x":
        return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
    if axis == "y":
        return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
    if axis == "z":
        return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
    raise ValueError(f"Invalid axis: {axis!r}")


def ease_in_out_quad(t: float) -> float:
    t = min(max(t, 0.0), 1.0)
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def snap_coord(state: CubeState, position: np.ndarray):
    """Round a continuous position back onto the integer grid."""
    grid = np.rint(position / state.unit + state.half).astype(int)
    grid = np.clip(grid, 0, state.size - 1)
    return tuple(int(v) for v in grid)


def snap_orientation(orientation: np.ndarray) -> np.ndarray:
    """Round a rotation matrix to the nearest axis-aligned orientation."""
    snapped = np.rint(orientation).astype(int)
    if round(np.linalg.det(snapped)) != 1:
        raise ValueError(f"Orientation drifted off the rotation group:\n{orientation}")
    return snapped


def apply_move(
    state: CubeState,
    move: Move,
    layer: Optional[Iterable[Cubie]] = None,
    settings: CubeSettings = DEFAULT_SETTINGS,
) -> CubeState:
    """Turn one layer by ``move.angle`` and snap every moved cubie.

    ``layer`` is the membership fixed when the move started; when omitted it
    is selected from the current state.
    """
    move.validate(state.size)
    if layer is None:
        layer = select_layer(state, move.axis, move.layer_index, settings)
    turn = rotation_matrix(move.axis, move.angle)
    index = AXIS_INDEX[move.axis]
    for cubie in layer:
        position = turn @ state.position(cubie)
        cubie.coord = snap_coord(state, position)
        cubie.orientation = snap_orientation(turn @ cubie.orientation)
        if cubie.coord[index] != move.layer_index:
            _LOGGER.warning(
                "Cubie %d left layer %s%d after snapping", cubie.id, move.axis, move.layer_index
            )
    return state
