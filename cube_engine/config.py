"""Settings and logging setup for the cube engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CubeSettings:
    """Tunable constants of the cube engine."""

    cubie_size: float = 1.0
    spacing: float = 0.05
    animation_duration: float = 0.3
    layer_tolerance: float = 0.1
    scramble_length: Optional[int] = None
    avoid_axis_repeat: bool = True
    min_size: int = 3
    max_size: int = 7

    @property
    def unit(self) -> float:
        return self.cubie_size + self.spacing

    def scramble_moves(self, n: int) -> int:
        """Number of moves in a scramble of an n-cube."""
        if self.scramble_length is not None:
            return self.scramble_length
        return n * n

    @classmethod
    def from_env(cls, environ=None) -> "CubeSettings":
        environ = os.environ if environ is None else environ
        settings = cls()
        if "CUBE_ANIMATION_DURATION" in environ:
            settings = replace(settings, animation_duration=float(environ["CUBE_ANIMATION_DURATION"]))
        if "CUBE_SCRAMBLE_LENGTH" in environ:
            settings = replace(settings, scramble_length=int(environ["CUBE_SCRAMBLE_LENGTH"]))
        if "CUBE_AVOID_AXIS_REPEAT" in environ:
            value = environ["CUBE_AVOID_AXIS_REPEAT"].strip().lower()
            settings = replace(settings, avoid_axis_repeat=value in ("1", "true", "yes", "on"))
        return settings


DEFAULT_SETTINGS = CubeSettings()


def configure_logging(level="INFO") -> None:
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
