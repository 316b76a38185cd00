import itertools
import re

import pytest

from cube_engine import Move, parse_move, parse_sequence, to_notation
from cube_engine.models import AXES, QUARTER_TURN

GRAMMAR = re.compile(r"^\d?[RLUDFBMES]'?$")


def test_outer_right_layer_on_3x3():
    assert to_notation("x", 2, QUARTER_TURN, 3) == "R"
    assert to_notation("x", 2, -QUARTER_TURN, 3) == "R'"


def test_middle_layers_on_3x3_use_slice_letters():
    assert to_notation("y", 1, QUARTER_TURN, 3) == "E"
    assert to_notation("y", 1, -QUARTER_TURN, 3) == "E'"
    assert to_notation("x", 1, -QUARTER_TURN, 3) == "M"
    assert to_notation("z", 1, -QUARTER_TURN, 3) == "S"


@pytest.mark.parametrize(
    "axis, layer, angle, expected",
    [
        ("y", 2, -QUARTER_TURN, "U"),
        ("y", 2, QUARTER_TURN, "U'"),
        ("y", 0, QUARTER_TURN, "D"),
        ("z", 2, QUARTER_TURN, "F"),
        ("z", 0, -QUARTER_TURN, "B"),
        ("x", 0, -QUARTER_TURN, "L"),
        ("x", 0, QUARTER_TURN, "L'"),
    ],
)
def test_face_letters_and_direction(axis, layer, angle, expected):
    assert to_notation(axis, layer, angle, 3) == expected


def test_opposite_faces_are_mirrored():
    # the same physical rotation reads clockwise on one face and
    # counter-clockwise on the opposite one
    for axis in AXES:
        near = to_notation(axis, 4, QUARTER_TURN, 5)
        far = to_notation(axis, 0, QUARTER_TURN, 5)
        assert near.endswith("'") != far.endswith("'")


def test_wide_prefix_counts_inward_from_nearest_face():
    assert to_notation("x", 3, QUARTER_TURN, 5) == "2R"
    assert to_notation("x", 1, -QUARTER_TURN, 5) == "2L"
    assert to_notation("x", 2, -QUARTER_TURN, 5) == "3L"
    assert to_notation("y", 2, -QUARTER_TURN, 4) == "2U"
    assert to_notation("y", 1, QUARTER_TURN, 4) == "2D"
    assert to_notation("z", 3, QUARTER_TURN, 7) == "4B'"


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_notation_is_total_and_matches_grammar(n):
    names = set()
    for axis, layer, angle in itertools.product(AXES, range(n), (QUARTER_TURN, -QUARTER_TURN)):
        first = to_notation(axis, layer, angle, n)
        assert to_notation(axis, layer, angle, n) == first
        assert GRAMMAR.match(first), first
        names.add(first)
    # every move gets its own name
    assert len(names) == 3 * n * 2


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_parse_move_inverts_to_notation(n):
    for axis, layer, angle in itertools.product(AXES, range(n), (QUARTER_TURN, -QUARTER_TURN)):
        move = Move(axis, layer, angle)
        assert parse_move(to_notation(axis, layer, angle, n), n) == move


def test_parse_sequence_expands_half_turns():
    moves = parse_sequence("R U2 R'", 3)
    assert [to_notation(m.axis, m.layer_index, m.angle, 3) for m in moves] == ["R", "U", "U", "R'"]
    assert parse_sequence("", 3) == []


@pytest.mark.parametrize("token, n", [("X", 3), ("R''", 3), ("M", 4), ("2M", 3), ("8R", 7), ("0R", 3)])
def test_invalid_tokens_are_rejected(token, n):
    with pytest.raises(ValueError):
        parse_move(token, n)


def test_parse_move_rejects_half_turns():
    with pytest.raises(ValueError):
        parse_move("R2", 3)


@pytest.mark.parametrize(
    "args",
    [("w", 0, QUARTER_TURN, 3), ("x", 3, QUARTER_TURN, 3), ("x", 0, 1.0, 3), ("x", -1, QUARTER_TURN, 3)],
)
def test_to_notation_rejects_invalid_moves(args):
    with pytest.raises(ValueError):
        to_notation(*args)
