# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccPhaseRoot"]

ARTIFACT = "controlled-controlled-phase-root"
CONTROLS = 2


def ccPhaseRoot(c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Phase Root gate."""
    if operand_shape("ccPhaseRoot", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccPhaseRoot(c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_phase_root_same_step(c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_phase_root(c_qbits0, c_qbits1, qbits)
