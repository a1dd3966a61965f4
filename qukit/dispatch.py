"""Operand shape checks shared by every gate dispatcher.

A dispatcher call receives its quantum operands either as single handles or
as collections of handles. All operands of one call must agree; collections
are walked in lock step up to the shortest one.
"""

import enum
from typing import Any, Sized

import numpy as np

from .errors import TypeMismatch


class Shape(enum.Enum):
    SCALAR = "handle"
    COLLECTION = "collection"


def shape_of(operand: Any) -> Shape:
    """Classifies one operand as a single handle or a collection of handles.

    Lists, tuples and numpy arrays with at least one dimension are
    collections. Everything else, 0-d arrays included, is treated as an
    opaque handle.
    """
    if isinstance(operand, np.ndarray):
        return Shape.COLLECTION if operand.ndim > 0 else Shape.SCALAR
    if isinstance(operand, (list, tuple)):
        return Shape.COLLECTION
    return Shape.SCALAR


def operand_shape(function_name: str, *operands: Any) -> Shape:
    """Returns the common shape of ``operands``.

    Raises:
        TypeMismatch: If handles and collections are mixed in one call.
    """
    shapes = [shape_of(operand) for operand in operands]
    if any(shape is not shapes[0] for shape in shapes):
        raise TypeMismatch(function_name, [shape.value for shape in shapes])
    return shapes[0]


def broadcast_length(*collections: Sized) -> int:
    """Number of lock-step iterations: the length of the shortest collection."""
    return min(len(collection) for collection in collections)
