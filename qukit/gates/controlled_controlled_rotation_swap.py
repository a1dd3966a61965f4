# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccRotationSwap"]

ARTIFACT = "controlled-controlled-rotation-swap"
CONTROLS = 2


def ccRotationSwap(theta, c_qbits0, c_qbits1, qbits0, qbits1, same_step=False):
    """Applies the doubly controlled Rotation Swap gate."""
    if operand_shape("ccRotationSwap", c_qbits0, c_qbits1, qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits0, qbits1)):
            ccRotationSwap(theta, c_qbits0[i], c_qbits1[i], qbits0[i], qbits1[i], same_step)
    elif same_step:
        native.controlled_controlled_rotation_swap_same_step(theta, c_qbits0, c_qbits1, qbits0, qbits1)
    else:
        native.controlled_controlled_rotation_swap(theta, c_qbits0, c_qbits1, qbits0, qbits1)
