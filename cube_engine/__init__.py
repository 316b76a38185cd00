"""Logical engine for an N x N x N twisty cube."""

from __future__ import annotations

from .config import CubeSettings, configure_logging
from .controller import CubeController
from .history import ScrambleHistory
from .layers import select_layer
from .models import Cubie, CubeState, Move
from .notation import parse_move, parse_sequence, to_notation
from .rotation import apply_move
from .scheduler import ActiveTurn, MoveScheduler
from .scramble import generate_scramble
from .store import create_cube, face_states, is_solved

__all__ = [
    "ActiveTurn",
    "CubeController",
    "CubeSettings",
    "CubeState",
    "Cubie",
    "Move",
    "MoveScheduler",
    "ScrambleHistory",
    "apply_move",
    "configure_logging",
    "create_cube",
    "face_states",
    "generate_scramble",
    "is_solved",
    "parse_move",
    "parse_sequence",
    "select_layer",
    "to_notation",
]
