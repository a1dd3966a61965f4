# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["phaseDagger"]

ARTIFACT = "phase-dagger"
CONTROLS = 0


def phaseDagger(qbits, c_control=None, same_step=False):
    """Applies the Phase Dagger gate."""
    if operand_shape("phaseDagger", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            phaseDagger(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.phase_dagger_same_step_classically_controlled(qbits, c_control)
        else:
            native.phase_dagger_classically_controlled(qbits, c_control)
    elif same_step:
        native.phase_dagger_same_step(qbits)
    else:
        native.phase_dagger(qbits)
