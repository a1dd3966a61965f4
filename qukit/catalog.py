# Defines the gate catalog the binding generator expands.
# Each entry becomes one generated function per control level.

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import CatalogError

CONTROL_LEVELS: Tuple[int, ...] = (0, 1, 2)

_NAME_PATTERN = re.compile(r"^[a-z]+(_[a-z]+)*$")


@dataclass(frozen=True)
class GateDescriptor:
    name: str
    arity: int = 1
    rotation: bool = False


GATE_CATALOG: Tuple[GateDescriptor, ...] = (
    GateDescriptor("hadamard", 1),
    GateDescriptor("pauli_x", 1),
    GateDescriptor("pauli_y", 1),
    GateDescriptor("pauli_z", 1),
    GateDescriptor("phase", 1),
    GateDescriptor("phase_dagger", 1),
    GateDescriptor("phase_root", 1),
    GateDescriptor("phase_root_dagger", 1),
    GateDescriptor("pauli_x_root", 1),
    GateDescriptor("swap", 2),
    GateDescriptor("swap_root", 2),

    GateDescriptor("rotation_hadamard", 1, rotation=True),
    GateDescriptor("rotation_pauli_x", 1, rotation=True),
    GateDescriptor("rotation_pauli_y", 1, rotation=True),
    GateDescriptor("rotation_pauli_z", 1, rotation=True),
    GateDescriptor("rotation_x", 1, rotation=True),
    GateDescriptor("rotation_y", 1, rotation=True),
    GateDescriptor("rotation_z", 1, rotation=True),
    GateDescriptor("rotation_swap", 2, rotation=True),
)


def validate_descriptor(descriptor: GateDescriptor) -> None:
    if not isinstance(descriptor, GateDescriptor):
        raise CatalogError(f"Catalog entries must be GateDescriptor instances, got {descriptor!r}.")
    if not isinstance(descriptor.name, str) or not _NAME_PATTERN.match(descriptor.name):
        raise CatalogError(
            f"Gate name {descriptor.name!r} must be lower snake case (e.g. 'pauli_x_root')."
        )
    # bool is an int subclass, so it is rejected explicitly
    if isinstance(descriptor.arity, bool) or descriptor.arity not in (1, 2):
        raise CatalogError(f"Gate '{descriptor.name}' has arity {descriptor.arity!r}; expected 1 or 2.")
    if not isinstance(descriptor.rotation, bool):
        raise CatalogError(f"Gate '{descriptor.name}' rotation flag must be a bool, got {descriptor.rotation!r}.")


def validate_catalog(catalog: Iterable[GateDescriptor]) -> Tuple[GateDescriptor, ...]:
    """Validates every descriptor and returns the catalog as a tuple.

    Raises:
        CatalogError: On the first malformed or duplicated descriptor.
    """
    entries = tuple(catalog)
    seen = set()
    for descriptor in entries:
        validate_descriptor(descriptor)
        if descriptor.name in seen:
            raise CatalogError(f"Gate '{descriptor.name}' appears more than once in the catalog.")
        seen.add(descriptor.name)
    return entries
