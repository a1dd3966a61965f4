# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPhase"]

ARTIFACT = "controlled-phase"
CONTROLS = 1


def cPhase(c_qbits, qbits, same_step=False):
    """Applies the controlled Phase gate."""
    if operand_shape("cPhase", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPhase(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_phase_same_step(c_qbits, qbits)
    else:
        native.controlled_phase(c_qbits, qbits)
