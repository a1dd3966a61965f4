# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cHadamard"]

ARTIFACT = "controlled-hadamard"
CONTROLS = 1


def cHadamard(c_qbits, qbits, same_step=False):
    """Applies the controlled Hadamard gate."""
    if operand_shape("cHadamard", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cHadamard(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_hadamard_same_step(c_qbits, qbits)
    else:
        native.controlled_hadamard(c_qbits, qbits)
