# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationY"]

ARTIFACT = "controlled-rotation-y"
CONTROLS = 1


def cRotationY(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation Y gate."""
    if operand_shape("cRotationY", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationY(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_y_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_y(theta, c_qbits, qbits)
