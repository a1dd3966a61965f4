# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["rotationSwap"]

ARTIFACT = "rotation-swap"
CONTROLS = 0


def rotationSwap(theta, qbits0, qbits1, c_control=None, same_step=False):
    """Applies the Rotation Swap gate."""
    if operand_shape("rotationSwap", qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits0, qbits1)):
            rotationSwap(theta, qbits0[i], qbits1[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.rotation_swap_same_step_classically_controlled(theta, qbits0, qbits1, c_control)
        else:
            native.rotation_swap_classically_controlled(theta, qbits0, qbits1, c_control)
    elif same_step:
        native.rotation_swap_same_step(theta, qbits0, qbits1)
    else:
        native.rotation_swap(theta, qbits0, qbits1)
