# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPauliY"]

ARTIFACT = "controlled-pauli-y"
CONTROLS = 1


def cPauliY(c_qbits, qbits, same_step=False):
    """Applies the controlled Pauli Y gate."""
    if operand_shape("cPauliY", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPauliY(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_pauli_y_same_step(c_qbits, qbits)
    else:
        native.controlled_pauli_y(c_qbits, qbits)
