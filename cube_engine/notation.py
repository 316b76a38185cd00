"""Translation between geometric moves and face notation.

Faces on the positive side of an axis are R (x), U (y) and F (z); their
opposites are L, D and B. A layer belongs to the face on its side of the
cube center, the middle layer of an odd cube to the negative face. Outer
layers use the bare letter, inner layers a numeric prefix counting layers
inward from that face (``2R``, ``3U``). On a 3x3 the middle layers are the
slices M (x), E (y) and S (z). A trailing ``'`` marks a counter-clockwise
turn.
"""

from __future__ import annotations

import re
from typing import List

from .models import QUARTER_TURN, Move

FACES = {"x": ("R", "L"), "y": ("U", "D"), "z": ("F", "B")}
SLICES = {"x": "M", "y": "E", "z": "S"}

FACE_AXIS = {face: (axis, side == 0) for axis, pair in FACES.items() for side, face in enumerate(pair)}
SLICE_AXIS = {letter: axis for axis, letter in SLICES.items()}

MOVE_PATTERN = re.compile(r"^(\d)?([RLUDFBMES])(2'?|')?$")


def _clockwise_sign(axis: str, positive: bool) -> int:
    """Sign of the angle that turns a face clockwise seen from outside it."""
    sign = 1 if axis in ("x", "z") else -1
    return sign if positive else -sign


def to_notation(axis: str, layer_index: int, angle: float, n: int) -> str:
    move = Move(axis, layer_index, angle).validate(n)
    half = (n - 1) / 2
    positive = move.layer_index > half
    clockwise = (move.angle > 0) == (_clockwise_sign(axis, positive) > 0)
    suffix = "" if clockwise else "'"

    if n == 3 and move.layer_index == 1:
        return SLICES[axis] + suffix

    face = FACES[axis][0 if positive else 1]
    depth = n - move.layer_index if positive else move.layer_index + 1
    prefix = "" if depth == 1 else str(depth)
    return prefix + face + suffix


def move_notation(move: Move, n: int) -> str:
    return to_notation(move.axis, move.layer_index, move.angle, n)


def _parse(token: str, n: int):
    match = MOVE_PATTERN.match(token)
    if not match:
        raise ValueError(f"Invalid move: {token}")
    prefix, letter, modifier = match.groups()
    modifier = modifier or ""

    if letter in SLICE_AXIS:
        if n != 3 or prefix:
            raise ValueError(f"Slice move {token} is only defined on a plain 3x3")
        axis, positive, layer_index = SLICE_AXIS[letter], False, 1
    else:
        axis, positive = FACE_AXIS[letter]
        depth = int(prefix) if prefix else 1
        if not 1 <= depth <= n:
            raise ValueError(f"Invalid move: {token} (depth {depth} on a {n}x{n}x{n} cube)")
        layer_index = n - depth if positive else depth - 1

    angle = _clockwise_sign(axis, positive) * QUARTER_TURN
    if modifier.endswith("'"):
        angle = -angle
    move = Move(axis, layer_index, angle).validate(n)
    return move, 2 if modifier.startswith("2") else 1


def parse_move(token: str, n: int) -> Move:
    """Parse a single quarter-turn token such as ``R``, ``3U'`` or ``M``."""
    move, turns = _parse(token, n)
    if turns != 1:
        raise ValueError(f"{token} is a half turn, use parse_sequence")
    return move


def parse_sequence(text: str, n: int) -> List[Move]:
    """Parse a space separated algorithm, expanding half turns (``R2``)."""
    moves: List[Move] = []
    for token in text.split():
        move, turns = _parse(token, n)
        moves.extend([move] * turns)
    return moves
