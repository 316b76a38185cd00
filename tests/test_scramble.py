import random

import pytest

from cube_engine import CubeSettings, generate_scramble
from cube_engine.models import QUARTER_TURN


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_default_length_scales_with_size(n):
    assert len(generate_scramble(n, rng=random.Random(0))) == n * n


def test_configured_length_and_explicit_count():
    settings = CubeSettings(scramble_length=25)
    assert len(generate_scramble(3, settings, random.Random(0))) == 25
    assert len(generate_scramble(3, settings, random.Random(0), count=4)) == 4


def test_same_seed_gives_same_scramble():
    first = generate_scramble(5, rng=random.Random(42))
    second = generate_scramble(5, rng=random.Random(42))
    assert first == second


def test_moves_are_legal():
    for move in generate_scramble(6, CubeSettings(scramble_length=300), random.Random(3)):
        assert move.axis in ("x", "y", "z")
        assert 0 <= move.layer_index < 6
        assert move.angle in (QUARTER_TURN, -QUARTER_TURN)


def test_axis_never_repeats_back_to_back():
    moves = generate_scramble(4, CubeSettings(scramble_length=500), random.Random(9))
    assert all(a.axis != b.axis for a, b in zip(moves, moves[1:]))


def test_axis_repeats_allowed_when_disabled():
    settings = CubeSettings(scramble_length=500, avoid_axis_repeat=False)
    moves = generate_scramble(4, settings, random.Random(9))
    assert any(a.axis == b.axis for a, b in zip(moves, moves[1:]))
