# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cSwap"]

ARTIFACT = "controlled-swap"
CONTROLS = 1


def cSwap(c_qbits, qbits0, qbits1, same_step=False):
    """Applies the controlled Swap gate."""
    if operand_shape("cSwap", c_qbits, qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits0, qbits1)):
            cSwap(c_qbits[i], qbits0[i], qbits1[i], same_step)
    elif same_step:
        native.controlled_swap_same_step(c_qbits, qbits0, qbits1)
    else:
        native.controlled_swap(c_qbits, qbits0, qbits1)
