# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccRotationHadamard"]

ARTIFACT = "controlled-controlled-rotation-hadamard"
CONTROLS = 2


def ccRotationHadamard(theta, c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Rotation Hadamard gate."""
    if operand_shape("ccRotationHadamard", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccRotationHadamard(theta, c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_rotation_hadamard_same_step(theta, c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_rotation_hadamard(theta, c_qbits0, c_qbits1, qbits)
