import random

import pytest

from cube_engine import CubeController, CubeSettings


@pytest.fixture
def settings():
    return CubeSettings(animation_duration=1.0)


@pytest.fixture
def controller(settings):
    return CubeController(3, settings, rng=random.Random(1234))
