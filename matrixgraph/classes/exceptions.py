"""
Exception types raised by matrixgraph.

All errors derive from GraphError so callers can catch every library failure
with a single except clause. ElementNotFoundError and InvalidArgumentError also
derive from the matching builtin (KeyError, ValueError).
"""


class GraphError(Exception):
    """Base class for all graph and network errors."""


class EmptyCollectionError(GraphError):
    """The operation needs at least one vertex but the structure is empty."""


class ElementNotFoundError(GraphError, KeyError):
    """A referenced vertex (or vertex index) is not present."""

    def __str__(self):
        # KeyError quotes its argument, keep the plain message instead
        return Exception.__str__(self)


class InvalidArgumentError(GraphError, ValueError):
    """An argument is outside its allowed domain, e.g. a negative edge weight."""


class UnknownPathError(GraphError):
    """No path exists between the requested source and target."""
