"""Cubie store: builds the surface cubies of an N-cube."""

from __future__ import annotations

import logging

import numpy as np

from .config import DEFAULT_SETTINGS, CubeSettings
from .models import FACE_NORMALS, Cubie, CubeState, Sticker

_LOGGER = logging.getLogger(__name__)


def validate_size(n: int, settings: CubeSettings = DEFAULT_SETTINGS) -> int:
    if not isinstance(n, int) or not settings.min_size <= n <= settings.max_size:
        raise ValueError(
            f"Cube size must be between {settings.min_size} and {settings.max_size}, got {n!r}"
        )
    return n


def surface_count(n: int) -> int:
    return n ** 3 - max(n - 2, 0) ** 3


def _stickers_for(x: int, y: int, z: int, n: int):
    last = n - 1
    faces = []
    if x == last:
        faces.append("R")
    if x == 0:
        faces.append("L")
    if y == last:
        faces.append("U")
    if y == 0:
        faces.append("D")
    if z == last:
        faces.append("F")
    if z == 0:
        faces.append("B")
    return [Sticker(face, np.array(FACE_NORMALS[face], dtype=int)) for face in faces]


def create_cube(n: int, settings: CubeSettings = DEFAULT_SETTINGS) -> CubeState:
    """Instantiate every surface cubie of an n-cube at its home coordinate."""
    validate_size(n, settings)
    state = CubeState(size=n, unit=settings.unit)
    last = n - 1
    for x in range(n):
        for y in range(n):
            for z in range(n):
                # skip the hidden core
                if 0 < x < last and 0 < y < last and 0 < z < last:
                    continue
                state.cubies.append(
                    Cubie(
                        id=len(state.cubies),
                        coord=(x, y, z),
                        home=(x, y, z),
                        stickers=_stickers_for(x, y, z, n),
                    )
                )
    _LOGGER.info("Created %dx%dx%d cube with %d cubies", n, n, n, len(state.cubies))
    return state


def face_states(state: CubeState):
    """Return a map of face letter to solved flag.

    A face is solved when every sticker currently pointing out of it has the
    same color.
    """
    seen = {face: set() for face in FACE_NORMALS}
    lookup = {normal: face for face, normal in FACE_NORMALS.items()}
    for cubie in state.cubies:
        for home_face, direction in cubie.sticker_directions().items():
            seen[lookup[direction]].add(home_face)
    return {face: len(colors) == 1 for face, colors in seen.items()}


def is_solved(state: CubeState) -> bool:
    identity = np.eye(3, dtype=int)
    return all(
        cubie.coord == cubie.home and np.array_equal(cubie.orientation, identity)
        for cubie in state.cubies
    )
