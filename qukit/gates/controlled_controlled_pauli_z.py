# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccPauliZ"]

ARTIFACT = "controlled-controlled-pauli-z"
CONTROLS = 2


def ccPauliZ(c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Pauli Z gate."""
    if operand_shape("ccPauliZ", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccPauliZ(c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_pauli_z_same_step(c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_pauli_z(c_qbits0, c_qbits1, qbits)
