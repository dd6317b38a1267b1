"""Exception taxonomy for the explicit-formula prime counter."""


class ExplicitFormulaError(Exception):
    """Base class for all errors raised by this package."""


class DomainError(ExplicitFormulaError, ValueError):
    """An input lies outside the mathematically defined domain (x < 2, n outside the Möbius table, ...)."""


class ParseError(ExplicitFormulaError, ValueError):
    """A zero-list file could not be parsed. Nothing from the file is kept."""

    def __init__(self, message, path=None, line_number=None):
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        elif path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ConvergenceError(ExplicitFormulaError, ArithmeticError):
    """The root iteration of the Möbius inversion exceeded its bound before x^(1/n) fell below 2."""
