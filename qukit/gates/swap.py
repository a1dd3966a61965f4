# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["swap"]

ARTIFACT = "swap"
CONTROLS = 0


def swap(qbits0, qbits1, c_control=None, same_step=False):
    """Applies the Swap gate."""
    if operand_shape("swap", qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits0, qbits1)):
            swap(qbits0[i], qbits1[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.swap_same_step_classically_controlled(qbits0, qbits1, c_control)
        else:
            native.swap_classically_controlled(qbits0, qbits1, c_control)
    elif same_step:
        native.swap_same_step(qbits0, qbits1)
    else:
        native.swap(qbits0, qbits1)
