# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPauliX"]

ARTIFACT = "controlled-pauli-x"
CONTROLS = 1


def cPauliX(c_qbits, qbits, same_step=False):
    """Applies the controlled Pauli X gate."""
    if operand_shape("cPauliX", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPauliX(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_pauli_x_same_step(c_qbits, qbits)
    else:
        native.controlled_pauli_x(c_qbits, qbits)
