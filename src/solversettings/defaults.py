"""Default values for the Solver block."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from solversettings.limiters import Limiter


@dataclass(frozen=True)
class SolverDefaults:
    """Values applied to Solver block variables that the input leaves unset.

    ``t end`` is deliberately absent: it must always be given.
    """

    limiter: Limiter = Limiter.MINMOD2
    height_threshold: float = 1e-6
    sponge_layer: bool = False
    tile_buffer: int = 3
    cfl: float = 0.25
    max_dt: float = math.inf
    t_start: float = 0.0
    restart: bool = False
    initial_condition: str = ""

    def as_dict(self) -> dict[str, Any]:
        """Return the defaults as plain values (limiter by display name)."""
        data = asdict(self)
        data["limiter"] = self.limiter.value
        return data


DEFAULTS: SolverDefaults = SolverDefaults()
