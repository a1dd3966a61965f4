import enum
from typing import Union

from .dispatch import Shape, broadcast_length, operand_shape
from .engine import native


class MeasurementBasis(str, enum.Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @classmethod
    def parse(cls, basis: Union["MeasurementBasis", str]) -> "MeasurementBasis":
        if isinstance(basis, cls):
            return basis
        if isinstance(basis, str):
            try:
                return cls(basis.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown measurement basis {basis!r}; expected one of 'x', 'y', 'z'.")


def measurement(qbits, cbits, basis="z", same_step=False):
    """Measures ``qbits`` into the classical bits ``cbits``.

    Both operands are either single handles or collections; collections are
    paired element-wise up to the shorter one.

    Args:
        qbits: Qbit handle(s) to measure.
        cbits: Classical bit handle(s) receiving the outcomes.
        basis: 'x', 'y' or 'z' (default), or a MeasurementBasis.
        same_step: Schedule in the same step as the preceding operation.

    Raises:
        ValueError: If ``basis`` is not a known measurement basis.
        TypeMismatch: If a handle is paired with a collection.
    """
    basis = MeasurementBasis.parse(basis)
    _measure(qbits, cbits, basis, same_step)


def _measure(qbits, cbits, basis, same_step):
    if operand_shape("measurement", qbits, cbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits, cbits)):
            _measure(qbits[i], cbits[i], basis, same_step)
        return

    suffix = "_same_step" if same_step else ""
    getattr(native, f"measurement_{basis.value}{suffix}")(qbits, cbits)
