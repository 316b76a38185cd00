"""Layer selection by positional threshold."""

from __future__ import annotations

import logging
from typing import List

from .config import DEFAULT_SETTINGS, CubeSettings
from .models import AXIS_INDEX, Cubie, CubeState

_LOGGER = logging.getLogger(__name__)


def layer_threshold(state: CubeState, layer_index: int) -> float:
    return state.unit * (layer_index - state.half)


def select_layer(
    state: CubeState,
    axis: str,
    layer_index: int,
    settings: CubeSettings = DEFAULT_SETTINGS,
) -> List[Cubie]:
    """Return the cubies whose position along ``axis`` matches ``layer_index``.

    The comparison is done on continuous positions within
    ``settings.layer_tolerance``; on a snapped cube it is equivalent to
    comparing integer coordinates.
    """
    index = AXIS_INDEX[axis]
    threshold = layer_threshold(state, layer_index)
    layer = [
        cubie
        for cubie in state.cubies
        if abs(state.position(cubie)[index] - threshold) < settings.layer_tolerance
    ]
    if not layer:
        _LOGGER.debug("No cubies found on layer %s%d", axis, layer_index)
    return layer
