class ChronastroError(Exception):
    """Base error."""

class InvalidArgumentError(ChronastroError, ValueError):
    """Raised for malformed calendar components or an unknown marker/phase index."""

class OutOfRangeError(ChronastroError, ValueError):
    """Raised when a year or date lies outside an algorithm's validated domain."""

class DataNotFoundError(ChronastroError, LookupError):
    """Raised when a coefficient set or table sample the algorithm needs is missing."""

class ConvergenceError(ChronastroError, RuntimeError):
    """Raised when an iterative finder exceeds its iteration cap."""
