# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccSwapRoot"]

ARTIFACT = "controlled-controlled-swap-root"
CONTROLS = 2


def ccSwapRoot(c_qbits0, c_qbits1, qbits0, qbits1, same_step=False):
    """Applies the doubly controlled Swap Root gate."""
    if operand_shape("ccSwapRoot", c_qbits0, c_qbits1, qbits0, qbits1) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits0, qbits1)):
            ccSwapRoot(c_qbits0[i], c_qbits1[i], qbits0[i], qbits1[i], same_step)
    elif same_step:
        native.controlled_controlled_swap_root_same_step(c_qbits0, c_qbits1, qbits0, qbits1)
    else:
        native.controlled_controlled_swap_root(c_qbits0, c_qbits1, qbits0, qbits1)
