class SortError(Exception):
    """Base class for errors raised by sortlab."""


class SortPreconditionError(SortError, ValueError):
    """An engine was called with arguments it cannot work with (bad index range, unknown algorithm)."""


class DataFileError(SortError, OSError):
    """A data file could not be read or written."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not open file '{self.path}': {reason}")
