# qukit/errors.py

"""
Exception classes raised by the qukit bindings and the binding generator.
"""

from typing import Iterable

# ==============================================================================
#  Custom Exception Classes
# ==============================================================================

class QukitError(Exception):
    """Base class for every error raised by qukit itself."""
    pass


class TypeMismatch(QukitError, TypeError):
    """Raised when the operands of one call mix handles and collections."""

    def __init__(self, function_name: str, shapes: Iterable[str]):
        self.function_name = function_name
        self.shapes = tuple(shapes)
        super().__init__(
            f"type mismatch in {function_name}(): operands must be all handles "
            f"or all collections, got ({', '.join(self.shapes)})"
        )


class CatalogError(QukitError, ValueError):
    """Raised when the gate catalog contains a malformed descriptor."""
    pass


class EngineUnavailableError(QukitError, RuntimeError):
    """Raised when the native amplitude engine cannot be imported."""
    pass
