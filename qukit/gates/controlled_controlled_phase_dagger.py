# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccPhaseDagger"]

ARTIFACT = "controlled-controlled-phase-dagger"
CONTROLS = 2


def ccPhaseDagger(c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Phase Dagger gate."""
    if operand_shape("ccPhaseDagger", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccPhaseDagger(c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_phase_dagger_same_step(c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_phase_dagger(c_qbits0, c_qbits1, qbits)
