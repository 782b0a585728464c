# src/solversettings/reporting.py
"""Delivery of non-fatal diagnostics raised while reading the Solver block."""

from __future__ import annotations

import logging
from typing import Final, Protocol, runtime_checkable

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class Reporter(Protocol):
    """Protocol for the channel that receives resolver warnings.

    The resolver keeps going after reporting; how the message reaches the
    user (console, log file, GUI) is up to the implementation.
    """

    def warning(self, message: str) -> None:
        """Report a recoverable problem with an input value.

        Args:
            message: Fully formatted warning text
        """
        ...

    def label_unrecognized(self, label: str) -> None:
        """Report an input label that the block does not understand.

        Args:
            label: The label exactly as it appeared in the input
        """
        ...


class LoggingReporter:
    """Reporter that writes diagnostics to the ``logging`` module."""

    def warning(self, message: str) -> None:
        logger.warning(message)

    def label_unrecognized(self, label: str) -> None:
        logger.warning("Input label not recognized: '%s'. It will be ignored.", label)


class MockReporter:
    """Reporter that records calls for testing."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.unrecognized_labels: list[str] = []

    def warning(self, message: str) -> None:
        """Record the warning without delivering it."""
        self.warnings.append(message)

    def label_unrecognized(self, label: str) -> None:
        """Record the unrecognized label without delivering it."""
        self.unrecognized_labels.append(label)

    @property
    def call_count(self) -> int:
        """Total number of diagnostics recorded."""
        return len(self.warnings) + len(self.unrecognized_labels)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.warnings = []
        self.unrecognized_labels = []
