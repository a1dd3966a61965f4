# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["phase"]

ARTIFACT = "phase"
CONTROLS = 0


def phase(qbits, c_control=None, same_step=False):
    """Applies the Phase gate."""
    if operand_shape("phase", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            phase(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.phase_same_step_classically_controlled(qbits, c_control)
        else:
            native.phase_classically_controlled(qbits, c_control)
    elif same_step:
        native.phase_same_step(qbits)
    else:
        native.phase(qbits)
