# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cPhaseDagger"]

ARTIFACT = "controlled-phase-dagger"
CONTROLS = 1


def cPhaseDagger(c_qbits, qbits, same_step=False):
    """Applies the controlled Phase Dagger gate."""
    if operand_shape("cPhaseDagger", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cPhaseDagger(c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_phase_dagger_same_step(c_qbits, qbits)
    else:
        native.controlled_phase_dagger(c_qbits, qbits)
