# General single-qbit rotation U(theta, lambda, phi) and its controlled forms.
# The three angles are passed unchanged to every call; only the qbit operands
# are broadcast.

from .dispatch import Shape, broadcast_length, operand_shape
from .engine import native


def rotationU(theta, lambda_, phi, qbits, c_control=None, same_step=False):
    """Applies the U(theta, lambda, phi) rotation to ``qbits``.

    Args:
        theta, lambda_, phi: Rotation angles in radians.
        qbits: A qbit handle or a collection of handles.
        c_control: Optional classical bit; the rotation only applies when it
            holds a true value.
        same_step: Schedule in the same step as the preceding operation.
    """
    if operand_shape("rotationU", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            rotationU(theta, lambda_, phi, qbits[i], c_control, same_step)
    elif c_control is not None:
        if same_step:
            native.rotation_u_same_step_classically_controlled(theta, lambda_, phi, qbits, c_control)
        else:
            native.rotation_u_classically_controlled(theta, lambda_, phi, qbits, c_control)
    elif same_step:
        native.rotation_u_same_step(theta, lambda_, phi, qbits)
    else:
        native.rotation_u(theta, lambda_, phi, qbits)


def cRotationU(theta, lambda_, phi, c_qbits, qbits, same_step=False):
    """Applies the controlled U(theta, lambda, phi) rotation."""
    if operand_shape("cRotationU", c_qbits, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits, qbits)):
            cRotationU(theta, lambda_, phi, c_qbits[i], qbits[i], same_step)
    elif same_step:
        native.controlled_rotation_u_same_step(theta, lambda_, phi, c_qbits, qbits)
    else:
        native.controlled_rotation_u(theta, lambda_, phi, c_qbits, qbits)


def ccRotationU(theta, lambda_, phi, c_qbits0, c_qbits1, qbits, same_step=False):
    """Applies the doubly controlled U(theta, lambda, phi) rotation."""
    if operand_shape("ccRotationU", c_qbits0, c_qbits1, qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(c_qbits0, c_qbits1, qbits)):
            ccRotationU(theta, lambda_, phi, c_qbits0[i], c_qbits1[i], qbits[i], same_step)
    elif same_step:
        native.controlled_controlled_rotation_u_same_step(theta, lambda_, phi, c_qbits0, c_qbits1, qbits)
    else:
        native.controlled_controlled_rotation_u(theta, lambda_, phi, c_qbits0, c_qbits1, qbits)
