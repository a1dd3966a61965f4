# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationHadamard"]

ARTIFACT = "controlled-rotation-hadamard"
CONTROLS = 1


def cRotationHadamard(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation Hadamard gate."""
    if operand_shape("cRotationHadamard", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationHadamard(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_hadamard_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_hadamard(theta, c_qbits, qbits)
