class VectorStoreError(Exception):
    """Base class for errors reported by the vector store."""


class EmptyStoreError(VectorStoreError, LookupError):
    """Raised when a nearest-neighbour query runs against a store with no records.

    The store stays usable; callers can insert records and query again.
    """

    pass


class DimensionMismatchError(VectorStoreError, ValueError):
    """Raised when two vectors of unequal length are compared."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Vector length mismatch: expected {expected} components, got {actual}"
        )


class ConfigError(RuntimeError):
    """Raised when a store setting, such as the dimension policy, has an unknown value."""

    pass
