# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccPauliXRoot"]

ARTIFACT = "controlled-controlled-pauli-x-root"
CONTROLS = 2


def ccPauliXRoot(c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Pauli X Root gate."""
    if operand_shape("ccPauliXRoot", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccPauliXRoot(c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_pauli_x_root_same_step(c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_pauli_x_root(c_qbits0, c_qbits1, qbits)
