# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccSwap"]

ARTIFACT = "controlled-controlled-swap"
CONTROLS = 2


def ccSwap(c_qbits0, c_qbits1, qbits0, qbits1, same_step=False):
    """Applies the doubly controlled Swap gate."""
    if operand_shape("ccSwap", c_qbits0, c_qbits1, qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits0, qbits1)):
            ccSwap(c_qbits0[i], c_qbits1[i], qbits0[i], qbits1[i], same_step)
    elif same_step:
        native.controlled_controlled_swap_same_step(c_qbits0, c_qbits1, qbits0, qbits1)
    else:
        native.controlled_controlled_swap(c_qbits0, c_qbits1, qbits0, qbits1)
