# This file is generated by qukit.bindgen. Do not edit.
from qukit.dispatch import Shape, broadcast_length, operand_shape
from qukit.engine import native

__all__ = ["pauliXRoot"]

ARTIFACT = "pauli-x-root"
CONTROLS = 0


def pauliXRoot(qbits, c_control=None, same_step=False):
    """Applies the Pauli X Root gate."""
    if operand_shape("pauliXRoot", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            pauliXRoot(qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.pauli_x_root_same_step_classically_controlled(qbits, c_control)
        else:
            native.pauli_x_root_classically_controlled(qbits, c_control)
    elif same_step:
        native.pauli_x_root_same_step(qbits)
    else:
        native.pauli_x_root(qbits)
