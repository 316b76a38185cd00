import logging

import pytest

from cube_engine import CubeSettings, configure_logging


def test_defaults():
    settings = CubeSettings()
    assert settings.unit == pytest.approx(1.05)
    assert settings.animation_duration == 0.3
    assert settings.scramble_moves(3) == 9
    assert settings.scramble_moves(7) == 49


def test_from_env_overrides():
    settings = CubeSettings.from_env({
        "CUBE_ANIMATION_DURATION": "0.5",
        "CUBE_SCRAMBLE_LENGTH": "30",
        "CUBE_AVOID_AXIS_REPEAT": "no",
    })
    assert settings.animation_duration == 0.5
    assert settings.scramble_moves(5) == 30
    assert settings.avoid_axis_repeat is False


def test_from_env_without_overrides():
    assert CubeSettings.from_env({}) == CubeSettings()


def test_configure_logging_accepts_names(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging("debug")
    assert calls["level"] == "DEBUG"
