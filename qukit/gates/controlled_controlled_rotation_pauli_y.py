# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["ccRotationPauliY"]

ARTIFACT = "controlled-controlled-rotation-pauli-y"
CONTROLS = 2


def ccRotationPauliY(theta, c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled Rotation Pauli Y gate."""
    if operand_shape("ccRotationPauliY", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccRotationPauliY(theta, c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_rotation_pauli_y_same_step(theta, c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_rotation_pauli_y(theta, c_qbits0, c_qbits1, qbits)
