# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPauliXRoot"]

ARTIFACT = "controlled-pauli-x-root"
CONTROLS = 1


def cPauliXRoot(c_qbits, qbits, same_step=False):
    """Applies the controlled Pauli X Root gate."""
    if operand_shape("cPauliXRoot", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPauliXRoot(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_pauli_x_root_same_step(c_qbits, qbits)
    else:
        native.controlled_pauli_x_root(c_qbits, qbits)
