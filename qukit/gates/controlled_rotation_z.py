# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationZ"]

ARTIFACT = "controlled-rotation-z"
CONTROLS = 1


def cRotationZ(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation Z gate."""
    if operand_shape("cRotationZ", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationZ(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_z_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_z(theta, c_qbits, qbits)
