# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationPauliX"]

ARTIFACT = "controlled-rotation-pauli-x"
CONTROLS = 1


def cRotationPauliX(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation Pauli X gate."""
    if operand_shape("cRotationPauliX", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationPauliX(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_pauli_x_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_pauli_x(theta, c_qbits, qbits)
