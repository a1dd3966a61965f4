# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPhaseRoot"]

ARTIFACT = "controlled-phase-root"
CONTROLS = 1


def cPhaseRoot(c_qbits, qbits, same_step=False):
    """Applies the controlled Phase Root gate."""
    if operand_shape("cPhaseRoot", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPhaseRoot(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_phase_root_same_step(c_qbits, qbits)
    else:
        native.controlled_phase_root(c_qbits, qbits)
