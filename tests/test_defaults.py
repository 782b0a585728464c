import dataclasses
import math

import pytest

from solversettings.defaults import DEFAULTS, SolverDefaults
from solversettings.limiters import Limiter


def test_default_values() -> None:
    assert DEFAULTS.limiter is Limiter.MINMOD2
    assert DEFAULTS.height_threshold == 1e-6
    assert DEFAULTS.sponge_layer is False
    assert DEFAULTS.tile_buffer == 3
    assert DEFAULTS.cfl == 0.25
    assert math.isinf(DEFAULTS.max_dt)
    assert DEFAULTS.t_start == 0.0
    assert DEFAULTS.restart is False
    assert DEFAULTS.initial_condition == ""


def test_defaults_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULTS.cfl = 0.4  # type: ignore[misc]


def test_no_default_for_t_end() -> None:
    assert not hasattr(SolverDefaults(), "t_end")


def test_as_dict_uses_limiter_name() -> None:
    data = DEFAULTS.as_dict()
    assert data["limiter"] == "MinMod2"
    assert data["tile_buffer"] == 3
    assert set(data) == {f.name for f in dataclasses.fields(SolverDefaults)}
