# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPauliZ"]

ARTIFACT = "controlled-pauli-z"
CONTROLS = 1


def cPauliZ(c_qbits, qbits, same_step=False):
    """Applies the controlled Pauli Z gate."""
    if operand_shape("cPauliZ", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPauliZ(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_pauli_z_same_step(c_qbits, qbits)
    else:
        native.controlled_pauli_z(c_qbits, qbits)
