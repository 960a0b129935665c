"""Exceptions raised by the name data engine."""


class NameDataError(Exception):
    """Base class for name dataset errors."""

    pass


class ParseError(NameDataError, ValueError):
    """Raised when a dataset line has a count field that is not a valid count."""

    def __init__(self, message: str, line_number: int | None = None, line: str = ""):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class DegenerateDistribution(NameDataError, ArithmeticError):
    """Raised when a bias/count combination cannot form a distribution.

    Covers an all-zero transformed total, zero raised to a negative bias,
    and transformed weights that overflow.
    """

    pass


class EmptyDataset(NameDataError, LookupError):
    """Raised when sampling a dataset with no entries."""

    pass


class NotInitialized(NameDataError, RuntimeError):
    """Raised when sampling before probabilities have been computed."""

    pass


class DatasetNotFound(NameDataError, FileNotFoundError):
    """Raised when a dataset file does not exist."""

    pass
