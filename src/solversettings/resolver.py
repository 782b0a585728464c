# src/solversettings/resolver.py
"""Interpret the label/value pairs of a Solver block.

The resolver converts each value to its typed form, validates it, fills in
defaults for anything left unset and checks that the run times are ordered.
Out-of-range values raise ``FatalError``; unrecognized limiter or restart
values and unknown labels are reported as warnings and processing continues.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Final, TypeVar

from pydantic import TypeAdapter, ValidationError

from solversettings.defaults import DEFAULTS, SolverDefaults
from solversettings.errors import ConversionError, FatalError
from solversettings.limiters import Limiter
from solversettings.reporting import LoggingReporter, Reporter
from solversettings.settings import CourantNumber, PositiveReal, SolverSettings, TileWidth

logger: Final = logging.getLogger(__name__)

LabelValuePair = tuple[str, str]

_N = TypeVar("_N", int, float)

_REAL: Final = TypeAdapter(float)
_INTEGER: Final = TypeAdapter(int)
_POSITIVE: Final = TypeAdapter(PositiveReal)
_COURANT: Final = TypeAdapter(CourantNumber)
_TILE_WIDTH: Final = TypeAdapter(TileWidth)

# Fortran-style list-directed numbers: 1, -2.5, .5, 1e-3, 1.5D+2, inf
_REAL_SYNTAX: Final = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?|[+-]?inf(?:inity)?", re.IGNORECASE | re.ASCII
)
_INTEGER_SYNTAX: Final = re.compile(r"[+-]?\d+", re.ASCII)
_FORTRAN_EXPONENT: Final = re.compile(r"[dD](?=[+-]?\d+$)")

_RESTART_TOKENS: Final[dict[str, bool]] = {"on": True, "off": False}


class SettingsResolver:
    """Populates a ``SolverSettings`` record from a tokenized Solver block.

    The resolver holds no state between calls, so a single instance can be
    reused for any number of input files.

    Examples:
        settings = SolverSettings(input_file="run.txt")
        SettingsResolver().resolve([("CFL", "0.3"), ("t end", "10.0")], settings)
    """

    def __init__(
        self,
        reporter: Reporter | None = None,
        defaults: SolverDefaults = DEFAULTS,
    ) -> None:
        """Initialize the resolver.

        Args:
            reporter: Receives warnings (default: LoggingReporter)
            defaults: Values for variables the input leaves unset
        """
        self.reporter: Reporter = reporter or LoggingReporter()
        self.defaults = defaults
        self._handlers: dict[str, Callable[[str, SolverSettings], None]] = {
            "limiter": self._set_limiter,
            "height threshold": self._set_height_threshold,
            "sponge strength": self._set_sponge_strength,
            "tile buffer": self._set_tile_buffer,
            "cfl": self._set_cfl,
            "max dt": self._set_max_dt,
            "t start": self._set_t_start,
            "t end": self._set_t_end,
            "restart": self._set_restart,
            "initial condition": self._set_initial_condition,
        }

    @property
    def labels(self) -> list[str]:
        """Labels recognized in the Solver block (lowercase)."""
        return list(self._handlers)

    def resolve(
        self, pairs: Iterable[LabelValuePair], settings: SolverSettings
    ) -> SolverSettings:
        """Apply a Solver block to ``settings`` in place.

        Args:
            pairs: (label, value) pairs in input order
            settings: Record to populate; must carry the input file name

        Returns:
            The same ``settings`` object, fully populated

        Raises:
            FatalError: If a value is out of range or cannot be converted,
                if 't end' is missing, or if 't start' is after 't end'
        """
        given: set[str] = set()

        for label, value in pairs:
            key = label.strip().lower()
            handler = self._handlers.get(key)
            if handler is None:
                self.reporter.label_unrecognized(label)
                continue
            given.add(key)
            handler(value, settings)

        self._apply_defaults(given, settings)

        if "t end" not in given:
            raise FatalError(
                settings.input_file, "The block variable 't end' must be specified.", "t end"
            )

        # t_end is always assigned once 't end' has been given
        if not settings.t_start <= settings.t_end:  # type: ignore[operator]
            raise FatalError(
                settings.input_file,
                "The block variable 't end' must not be earlier than the block variable 't start'.",
                "t end",
            )

        logger.debug("Solver settings resolved from %s", settings.input_file)
        return settings

    # ---- defaults ----
    def _apply_defaults(self, given: set[str], settings: SolverSettings) -> None:
        d = self.defaults
        if "limiter" not in given:
            settings.limiter = d.limiter
        if "height threshold" not in given:
            settings.height_threshold = d.height_threshold
        if "sponge strength" not in given:
            settings.sponge_layer = d.sponge_layer
            settings.sponge_strength = None
        if "tile buffer" not in given:
            settings.tile_buffer = d.tile_buffer
        if "cfl" not in given:
            settings.cfl = d.cfl
        if "max dt" not in given:
            settings.max_dt = d.max_dt
        if "t start" not in given:
            settings.t_start = d.t_start
        if "restart" not in given:
            settings.restart = d.restart
        if "initial condition" not in given:
            settings.initial_condition = d.initial_condition

        unset = [label for label in self._handlers if label not in given and label != "t end"]
        if unset:
            logger.debug("Using defaults for: %s", ", ".join(unset))

    # ---- conversion ----
    @staticmethod
    def _to_real(value: str, variable: str, settings: SolverSettings) -> float:
        text = value.strip()
        if not _REAL_SYNTAX.fullmatch(text):
            raise ConversionError(
                settings.input_file,
                f"The block variable '{variable}' must be a real number, got '{value}'.",
                variable,
            )
        try:
            return _REAL.validate_python(_FORTRAN_EXPONENT.sub("e", text))
        except ValidationError as err:
            raise ConversionError(
                settings.input_file,
                f"The block variable '{variable}' must be a real number, got '{value}'.",
                variable,
                err,
            ) from err

    @staticmethod
    def _to_integer(value: str, variable: str, settings: SolverSettings) -> int:
        text = value.strip()
        if not _INTEGER_SYNTAX.fullmatch(text):
            raise ConversionError(
                settings.input_file,
                f"The block variable '{variable}' must be an integer, got '{value}'.",
                variable,
            )
        try:
            return _INTEGER.validate_python(text)
        except ValidationError as err:
            raise ConversionError(
                settings.input_file,
                f"The block variable '{variable}' must be an integer, got '{value}'.",
                variable,
                err,
            ) from err

    @staticmethod
    def _constrain(
        adapter: TypeAdapter[_N],
        value: _N,
        variable: str,
        requirement: str,
        settings: SolverSettings,
    ) -> _N:
        try:
            return adapter.validate_python(value)
        except ValidationError as err:
            raise FatalError(
                settings.input_file,
                f"The block variable '{variable}' {requirement}.",
                variable,
            ) from err

    # ---- per-label handlers ----
    def _set_limiter(self, value: str, settings: SolverSettings) -> None:
        limiter = Limiter.from_token(value)
        if limiter is None:
            self.reporter.warning(
                f"In the 'Solver' block in the input file {settings.input_file} "
                f"the value '{value}' of 'limiter' is not recognized. "
                f"Using the default limiter = {self.defaults.limiter.value}"
            )
            limiter = self.defaults.limiter
        settings.limiter = limiter
        logger.debug("limiter = %s", limiter.value)

    def _set_height_threshold(self, value: str, settings: SolverSettings) -> None:
        threshold = self._to_real(value, "Height threshold", settings)
        settings.height_threshold = self._constrain(
            _POSITIVE, threshold, "Height threshold", "must be positive", settings
        )
        logger.debug("height threshold = %g", threshold)

    def _set_sponge_strength(self, value: str, settings: SolverSettings) -> None:
        strength = self._to_real(value, "Sponge Strength", settings)
        settings.sponge_strength = self._constrain(
            _POSITIVE, strength, "Sponge Strength", "must be positive", settings
        )
        settings.sponge_layer = True
        logger.debug("sponge layer enabled, strength = %g", strength)

    def _set_tile_buffer(self, value: str, settings: SolverSettings) -> None:
        buffer = self._to_integer(value, "Tile Buffer", settings)
        settings.tile_buffer = self._constrain(
            _TILE_WIDTH, buffer, "Tile Buffer", "must be greater than 1", settings
        )
        logger.debug("tile buffer = %d", buffer)

    def _set_cfl(self, value: str, settings: SolverSettings) -> None:
        cfl = self._to_real(value, "cfl", settings)
        settings.cfl = self._constrain(
            _COURANT, cfl, "cfl", "must be in the range (0,0.5]", settings
        )
        logger.debug("cfl = %g", cfl)

    def _set_max_dt(self, value: str, settings: SolverSettings) -> None:
        max_dt = self._to_real(value, "max dt", settings)
        settings.max_dt = self._constrain(
            _POSITIVE, max_dt, "max dt", "must be positive", settings
        )
        logger.debug("max dt = %g", max_dt)

    def _set_t_start(self, value: str, settings: SolverSettings) -> None:
        settings.t_start = self._to_real(value, "t start", settings)
        logger.debug("t start = %g", settings.t_start)

    def _set_t_end(self, value: str, settings: SolverSettings) -> None:
        settings.t_end = self._to_real(value, "t end", settings)
        logger.debug("t end = %g", settings.t_end)

    def _set_restart(self, value: str, settings: SolverSettings) -> None:
        restart = _RESTART_TOKENS.get(value.strip().lower())
        if restart is None:
            self.reporter.warning(
                f"In the 'Solver' block in the input file {settings.input_file} "
                f"the value '{value}' of 'Restart' is not recognized. "
                "Using the default setting Restart = "
                + ("on" if self.defaults.restart else "off")
            )
            restart = self.defaults.restart
        settings.restart = restart
        logger.debug("restart = %s", restart)

    def _set_initial_condition(self, value: str, settings: SolverSettings) -> None:
        settings.initial_condition = value
        logger.debug("initial condition = %r", value)


def resolve_solver_block(
    pairs: Iterable[LabelValuePair],
    settings: SolverSettings,
    reporter: Reporter | None = None,
) -> SolverSettings:
    """Populate ``settings`` from a Solver block using a fresh resolver.

    Args:
        pairs: (label, value) pairs in input order
        settings: Record to populate in place
        reporter: Receives warnings (default: LoggingReporter)

    Returns:
        The populated ``settings``

    Raises:
        FatalError: See ``SettingsResolver.resolve``
    """
    return SettingsResolver(reporter).resolve(pairs, settings)
