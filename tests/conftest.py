import pytest

from solversettings.reporting import MockReporter
from solversettings.resolver import SettingsResolver
from solversettings.settings import SolverSettings

INPUT_FILE = "test_input.txt"


@pytest.fixture
def settings() -> SolverSettings:
    return SolverSettings(input_file=INPUT_FILE)


@pytest.fixture
def reporter() -> MockReporter:
    return MockReporter()


@pytest.fixture
def resolver(reporter: MockReporter) -> SettingsResolver:
    return SettingsResolver(reporter)
