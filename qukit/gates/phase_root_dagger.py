# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["phaseRootDagger"]

ARTIFACT = "phase-root-dagger"
CONTROLS = 0


def phaseRootDagger(qbits, c_control=None, same_step=False):
    """Applies the Phase Root Dagger gate."""
    if operand_shape("phaseRootDagger", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            phaseRootDagger(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.phase_root_dagger_same_step_classically_controlled(qbits, c_control)
        else:
            native.phase_root_dagger_classically_controlled(qbits, c_control)
    elif same_step:
        native.phase_root_dagger_same_step(qbits)
    else:
        native.phase_root_dagger(qbits)
