"""Collection store error hierarchy."""

from havenox.errors import HavenoxError


class DataError(HavenoxError):
    """Base for all havenox.data errors."""


class UnknownCollection(DataError):  # noqa: N818
    """Raised when a collection name is not one of the registered names."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown collection: {name}")
        self.name = name


class CorruptCollection(DataError):  # noqa: N818
    """Raised when a collection file does not hold a valid JSON array."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Collection {name!r} is corrupt: {reason}")
        self.name = name
        self.reason = reason
