# Lookup failures raised by the distance tables.


class IndexOutOfRangeError(IndexError):
    """A node index fell outside the allocated table dimension (index bookkeeping bug)."""


class UnknownNodeError(KeyError):
    """A query referenced a node that was not part of the instance at construction time."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        kind, nid = self.key if isinstance(self.key, tuple) and len(self.key) == 2 else ("node", self.key)
        return f"Unknown {kind}: {nid}"


class UnknownCustomerError(UnknownNodeError):
    """A query referenced a customer that has no precomputed distances."""
