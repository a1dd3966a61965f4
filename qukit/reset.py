from .dispatch import Shape, broadcast_length, operand_shape
from .engine import native


def reset(qbits, same_step=False):
    """Resets ``qbits`` to the zero state."""
    if operand_shape("reset", qbits) is Shape.COLLECTION:
        for i in range(broadcast_length(qbits)):
            reset(qbits[i], same_step)
    elif same_step:
        native.reset_same_step(qbits)
    else:
        native.reset(qbits)
