"""Data models for the logical cube state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

AXES = ("x", "y", "z")
AXIS_INDEX = {"x": 0, "y": 1, "z": 2}

QUARTER_TURN = math.pi / 2

# Outward normal of every face, in cube coordinates (+z is the front).
FACE_NORMALS: Dict[str, Tuple[int, int, int]] = {
    "R": (1, 0, 0),
    "L": (-1, 0, 0),
    "U": (0, 1, 0),
    "D": (0, -1, 0),
    "F": (0, 0, 1),
    "B": (0, 0, -1),
}

FACE_COLORS = {
    "R": "blue",
    "L": "green",
    "U": "white",
    "D": "yellow",
    "F": "red",
    "B": "orange",
}


@dataclass(frozen=True)
class Move:
    """A single quarter turn of one layer."""

    axis: str
    layer_index: int
    angle: float

    def __post_init__(self) -> None:
        if self.axis not in AXIS_INDEX:
            raise ValueError(f"Invalid axis: {self.axis!r}")
        if not math.isclose(abs(self.angle), QUARTER_TURN):
            raise ValueError(f"Invalid angle: {self.angle!r}")

    def inverse(self) -> "Move":
        return Move(self.axis, self.layer_index, -self.angle)

    def validate(self, n: int) -> "Move":
        if not 0 <= self.layer_index < n:
            raise ValueError(
                f"Layer index {self.layer_index} out of range for a {n}x{n}x{n} cube"
            )
        return self


@dataclass(eq=False)
class Sticker:
    """A colored face of a cubie, identified by the face it started on."""

    face: str
    normal: np.ndarray

    @property
    def color(self) -> str:
        return FACE_COLORS[self.face]


@dataclass(eq=False)
class Cubie:
    """One visible cubie: grid coordinate plus snapped orientation."""

    id: int
    coord: Tuple[int, int, int]
    home: Tuple[int, int, int]
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3, dtype=int))
    stickers: List[Sticker] = field(default_factory=list)

    def sticker_directions(self) -> Dict[str, Tuple[int, int, int]]:
        """Return the current outward direction of every sticker, keyed by home face."""
        return {
            sticker.face: tuple(int(v) for v in self.orientation @ sticker.normal)
            for sticker in self.stickers
        }


@dataclass(eq=False)
class CubeState:
    """All cubies of an N-cube plus the spacing used to place them."""

    size: int
    unit: float
    cubies: List[Cubie] = field(default_factory=list)

    @property
    def half(self) -> float:
        return (self.size - 1) / 2

    def position(self, cubie: Cubie) -> np.ndarray:
        """Continuous position of a cubie, centered on the cube."""
        return (np.array(cubie.coord, dtype=float) - self.half) * self.unit

    def by_id(self, cubie_id: int) -> Cubie:
        for cubie in self.cubies:
            if cubie.id == cubie_id:
                return cubie
        raise KeyError(cubie_id)

    def snapshot(self) -> Tuple[Tuple[int, Tuple[int, int, int], Tuple[int, ...]], ...]:
        """Hashable view of every cubie's coordinate and orientation."""
        return tuple(
            (cubie.id, cubie.coord, tuple(int(v) for v in cubie.orientation.flatten()))
            for cubie in sorted(self.cubies, key=lambda c: c.id)
        )
