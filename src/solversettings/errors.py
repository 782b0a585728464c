"""Exception classes for Solver block resolution.

Every error raised while reading the Solver block is a user input error and
names the input file it came from.
"""

from __future__ import annotations


class SettingsError(Exception):
    """Error in the Solver block of an input file.

    Includes the input file name and, when one is at fault, the block
    variable that triggered it.
    """

    def __init__(self, input_file: str, message: str, variable: str | None = None) -> None:
        """Initialize the exception.

        Args:
            input_file: Name of the input file holding the Solver block
            message: Human-readable description of the problem
            variable: Block variable at fault, if any
        """
        super().__init__(f"In the 'Solver' block in the input file {input_file}\n {message}")
        self.input_file: str = input_file
        self.message: str = message
        self.variable: str | None = variable


class FatalError(SettingsError):
    """Raised when the Solver block cannot produce usable settings.

    The run must not continue: callers are expected to stop the program.
    """

    pass


class ConversionError(FatalError):
    """Raised when a value cannot be converted to the type its label requires."""

    def __init__(
        self,
        input_file: str,
        message: str,
        variable: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize with conversion failure details.

        Args:
            input_file: Name of the input file holding the Solver block
            message: Description of the conversion failure
            variable: Block variable whose value failed to convert
            original_error: The original exception that was caught
        """
        super().__init__(input_file, message, variable)
        self.original_error = original_error
