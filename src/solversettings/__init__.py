"""Solver block settings - typed, validated run settings for the numerical solver."""

__version__ = "0.1.0"

from .defaults import DEFAULTS, SolverDefaults
from .errors import ConversionError, FatalError, SettingsError
from .limiters import Limiter
from .reporting import LoggingReporter, MockReporter, Reporter
from .resolver import LabelValuePair, SettingsResolver, resolve_solver_block
from .settings import SolverSettings

# Define what gets imported with: from solversettings import *
__all__ = [
    "DEFAULTS",
    "ConversionError",
    "FatalError",
    "LabelValuePair",
    "Limiter",
    "LoggingReporter",
    "MockReporter",
    "Reporter",
    "SettingsError",
    "SettingsResolver",
    "SolverDefaults",
    "SolverSettings",
    "resolve_solver_block",
]
