"""Exceptions raised by mapjoin."""


class MapJoinError(Exception):
    """Base class for all mapjoin errors."""


class InvalidJoinTypeError(MapJoinError, ValueError):
    """Raised when a join type tag is not one of the recognized values."""


class MissingComplementError(MapJoinError, TypeError):
    """Raised when discarded values are requested from a non-join iterable."""


class DuplicateKeyError(MapJoinError, ValueError):
    """Raised by from_iterable() when a key repeats under the strict policy."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key!r} already exists"
