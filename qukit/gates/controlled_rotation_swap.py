# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationSwap"]

ARTIFACT = "controlled-rotation-swap"
CONTROLS = 1


def cRotationSwap(theta, c_qbits, qbits0, qbits1, same_step=False):
    """Applies the controlled Rotation Swap gate."""
    if operand_shape("cRotationSwap", c_qbits, qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits0, qbits1)):
            cRotationSwap(theta, c_qbits[i], qbits0[i], qbits1[i], same_step)
    elif same_step:
        native.controlled_rotation_swap_same_step(theta, c_qbits, qbits0, qbits1)
    else:
        native.controlled_rotation_swap(theta, c_qbits, qbits0, qbits1)
