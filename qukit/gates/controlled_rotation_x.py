# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationX"]

ARTIFACT = "controlled-rotation-x"
CONTROLS = 1


def cRotationX(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation X gate."""
    if operand_shape("cRotationX", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationX(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_x_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_x(theta, c_qbits, qbits)
