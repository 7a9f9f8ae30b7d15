"""
Core data classes for matrix graph representation.

This module contains the value types, exceptions and helpers shared by the
graph classes and the analysis algorithms.
"""

from .exceptions import (
    GraphError,
    EmptyCollectionError,
    ElementNotFoundError,
    InvalidArgumentError,
    UnknownPathError,
)
from .pathnode import pypathnode

__all__ = [
    'GraphError',
    'EmptyCollectionError',
    'ElementNotFoundError',
    'InvalidArgumentError',
    'UnknownPathError',
    'pypathnode',
]
