"""Run settings populated from the Solver block of an input file."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, model_validator

from solversettings.defaults import DEFAULTS
from solversettings.limiters import Limiter

# Value constraints shared by the model and the Solver block resolver
PositiveReal = Annotated[float, Field(gt=0)]
CourantNumber = Annotated[float, Field(gt=0, le=0.5)]
TileWidth = Annotated[int, Field(gt=1)]


class SolverSettings(BaseModel):
    """Numerical solver settings for a single run.

    The record is created before the Solver block is read, with at least the
    name of the input file so diagnostics can point at it. The resolver then
    fills it in place; after that it is treated as read-only by the solver.

    Constraints declared here are checked when a record is constructed
    directly. Attribute assignment is not re-validated; the resolver checks
    each value against the same constraint types before assigning it.
    """

    # Diagnostics
    input_file: str = Field(..., description="Input file the Solver block came from")

    # Numerical scheme
    limiter: Limiter = Field(DEFAULTS.limiter, description="Slope limiter strategy")
    height_threshold: PositiveReal = Field(
        DEFAULTS.height_threshold, description="Flow depth below which cells are dry"
    )
    tile_buffer: TileWidth = Field(
        DEFAULTS.tile_buffer, description="Buffer width (cells) around active tiles"
    )

    # Boundary damping
    sponge_layer: bool = DEFAULTS.sponge_layer
    sponge_strength: PositiveReal | None = Field(
        None, description="Damping strength; only meaningful with sponge_layer"
    )

    # Time stepping
    cfl: CourantNumber = Field(DEFAULTS.cfl, description="Courant number")
    max_dt: PositiveReal = Field(DEFAULTS.max_dt, description="Largest permitted time step")
    t_start: float = Field(DEFAULTS.t_start, description="Simulation start time")
    t_end: float | None = Field(None, description="Simulation end time (mandatory input)")

    # Run control
    restart: bool = DEFAULTS.restart
    initial_condition: str = DEFAULTS.initial_condition

    # ---- validators ----
    @model_validator(mode="after")
    def check_consistency(self) -> SolverSettings:
        if self.sponge_layer and self.sponge_strength is None:
            raise ValueError("sponge_layer requires a sponge_strength")
        if self.t_end is not None and not self.t_start <= self.t_end:
            raise ValueError("t_end must not be earlier than t_start")
        return self

    # ---- convenience methods ----
    @property
    def limiter_name(self) -> str:
        """Display name of the selected limiter."""
        return self.limiter.value

    def summary(self) -> dict[str, Any]:
        """Return the settings as plain values, safe for ``yaml.safe_dump``.

        Returns:
            Mapping of field name to value, with the limiter by display name
        """
        data = self.model_dump()
        data["limiter"] = self.limiter_name
        return data
