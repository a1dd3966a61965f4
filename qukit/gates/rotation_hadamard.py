# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["rotationHadamard"]

ARTIFACT = "rotation-hadamard"
CONTROLS = 0


def rotationHadamard(theta, qbits, c_control=None, same_step=False):
    """Applies the Rotation Hadamard gate."""
    if operand_shape("rotationHadamard", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            rotationHadamard(theta, qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.rotation_hadamard_same_step_classically_controlled(theta, qbits, c_control)
        else:
            native.rotation_hadamard_classically_controlled(theta, qbits, c_control)
    elif same_step:
        native.rotation_hadamard_same_step(theta, qbits)
    else:
        native.rotation_hadamard(theta, qbits)
