# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["cRotationPauliZ"]

ARTIFACT = "controlled-rotation-pauli-z"
CONTROLS = 1


def cRotationPauliZ(theta, c_qbits, qbits, same_step=False):
    """Applies the controlled Rotation Pauli Z gate."""
    if operand_shape("cRotationPauliZ", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationPauliZ(theta, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_pauli_z_same_step(theta, c_qbits, qbits)
    else:
        native.controlled_rotation_pauli_z(theta, c_qbits, qbits)
