# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["hadamard"]

ARTIFACT = "hadamard"
CONTROLS = 0


def hadamard(qbits, c_control=None, same_step=False):
    """Applies the Hadamard gate."""
    if operand_shape("hadamard", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            hadamard(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.hadamard_same_step_classically_controlled(qbits, c_control)
        else:
            native.hadamard_classically_controlled(qbits, c_control)
    elif same_step:
        native.hadamard_same_step(qbits)
    else:
        native.hadamard(qbits)
