# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["pauliY"]

ARTIFACT = "pauli-y"
CONTROLS = 0


def pauliY(qbits, c_control=None, same_step=False):
    """Applies the Pauli Y gate."""
    if operand_shape("pauliY", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            pauliY(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.pauli_y_same_step_classically_controlled(qbits, c_control)
        else:
            native.pauli_y_classically_controlled(qbits, c_control)
    elif same_step:
        native.pauli_y_same_step(qbits)
    else:
        native.pauli_y(qbits)
