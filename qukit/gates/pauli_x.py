# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["pauliX"]

ARTIFACT = "pauli-x"
CONTROLS = 0


def pauliX(qbits, c_control=None, same_step=False):
    """Applies the Pauli X gate."""
    if operand_shape("pauliX", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            pauliX(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.pauli_x_same_step_classically_controlled(qbits, c_control)
        else:
            native.pauli_x_classically_controlled(qbits, c_control)
    elif same_step:
        native.pauli_x_same_step(qbits)
    else:
        native.pauli_x(qbits)
