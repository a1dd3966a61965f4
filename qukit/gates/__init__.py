# This file is generated by qukit.bindgen. Do not edit.
from .hadamard import hadamard
from .controlled_hadamard import cHadamard
from .controlled_controlled_hadamard import ccHadamard
from .pauli_x import pauliX
from .controlled_pauli_x import cPauliX
from .controlled_controlled_pauli_x import ccPauliX
from .pauli_y import pauliY
from .controlled_pauli_y import cPauliY
from .controlled_controlled_pauli_y import ccPauliY
from .pauli_z import pauliZ
from .controlled_pauli_z import cPauliZ
from .controlled_controlled_pauli_z import ccPauliZ
from .phase import phase
from .controlled_phase import cPhase
from .controlled_controlled_phase import ccPhase
from .phase_dagger import phaseDagger
from .controlled_phase_dagger import cPhaseDagger
from .controlled_controlled_phase_dagger import ccPhaseDagger
from .phase_root import phaseRoot
from .controlled_phase_root import cPhaseRoot
from .controlled_controlled_phase_root import ccPhaseRoot
from .phase_root_dagger import phaseRootDagger
from .controlled_phase_root_dagger import cPhaseRootDagger
from .controlled_controlled_phase_root_dagger import ccPhaseRootDagger
from .pauli_x_root import pauliXRoot
from .controlled_pauli_x_root import cPauliXRoot
from .controlled_controlled_pauli_x_root import ccPauliXRoot
from .swap import swap
from .controlled_swap import cSwap
from .controlled_controlled_swap import ccSwap
from .swap_root import swapRoot
from .controlled_swap_root import cSwapRoot
from .controlled_controlled_swap_root import ccSwapRoot
from .rotation_hadamard import rotationHadamard
from .controlled_rotation_hadamard import cRotationHadamard
from .controlled_controlled_rotation_hadamard import ccRotationHadamard
from .rotation_pauli_x import rotationPauliX
from .controlled_rotation_pauli_x import cRotationPauliX
from .controlled_controlled_rotation_pauli_x import ccRotationPauliX
from .rotation_pauli_y import rotationPauliY
from .controlled_rotation_pauli_y import cRotationPauliY
from .controlled_controlled_rotation_pauli_y import ccRotationPauliY
from .rotation_pauli_z import rotationPauliZ
from .controlled_rotation_pauli_z import cRotationPauliZ
from .controlled_controlled_rotation_pauli_z import ccRotationPauliZ
from .rotation_x import rotationX
from .controlled_rotation_x import cRotationX
from .controlled_controlled_rotation_x import ccRotationX
from .rotation_y import rotationY
from .controlled_rotation_y import cRotationY
from .controlled_controlled_rotation_y import ccRotationY
from .rotation_z import rotationZ
from .controlled_rotation_z import cRotationZ
from .controlled_controlled_rotation_z import ccRotationZ
from .rotation_swap import rotationSwap
from .controlled_rotation_swap import cRotationSwap
from .controlled_controlled_rotation_swap import ccRotationSwap

ARTIFACTS = {
    "hadamard": "hadamard",
    "cHadamard": "controlled-hadamard",
    "ccHadamard": "controlled-controlled-hadamard",
    "pauliX": "pauli-x",
    "cPauliX": "controlled-pauli-x",
    "ccPauliX": "controlled-controlled-pauli-x",
    "pauliY": "pauli-y",
    "cPauliY": "controlled-pauli-y",
    "ccPauliY": "controlled-controlled-pauli-y",
    "pauliZ": "pauli-z",
    "cPauliZ": "controlled-pauli-z",
    "ccPauliZ": "controlled-controlled-pauli-z",
    "phase": "phase",
    "cPhase": "controlled-phase",
    "ccPhase": "controlled-controlled-phase",
    "phaseDagger": "phase-dagger",
    "cPhaseDagger": "controlled-phase-dagger",
    "ccPhaseDagger": "controlled-controlled-phase-dagger",
    "phaseRoot": "phase-root",
    "cPhaseRoot": "controlled-phase-root",
    "ccPhaseRoot": "controlled-controlled-phase-root",
    "phaseRootDagger": "phase-root-dagger",
    "cPhaseRootDagger": "controlled-phase-root-dagger",
    "ccPhaseRootDagger": "controlled-controlled-phase-root-dagger",
    "pauliXRoot": "pauli-x-root",
    "cPauliXRoot": "controlled-pauli-x-root",
    "ccPauliXRoot": "controlled-controlled-pauli-x-root",
    "swap": "swap",
    "cSwap": "controlled-swap",
    "ccSwap": "controlled-controlled-swap",
    "swapRoot": "swap-root",
    "cSwapRoot": "controlled-swap-root",
    "ccSwapRoot": "controlled-controlled-swap-root",
    "rotationHadamard": "rotation-hadamard",
    "cRotationHadamard": "controlled-rotation-hadamard",
    "ccRotationHadamard": "controlled-controlled-rotation-hadamard",
    "rotationPauliX": "rotation-pauli-x",
    "cRotationPauliX": "controlled-rotation-pauli-x",
    "ccRotationPauliX": "controlled-controlled-rotation-pauli-x",
    "rotationPauliY": "rotation-pauli-y",
    "cRotationPauliY": "controlled-rotation-pauli-y",
    "ccRotationPauliY": "controlled-controlled-rotation-pauli-y",
    "rotationPauliZ": "rotation-pauli-z",
    "cRotationPauliZ": "controlled-rotation-pauli-z",
    "ccRotationPauliZ": "controlled-controlled-rotation-pauli-z",
    "rotationX": "rotation-x",
    "cRotationX": "controlled-rotation-x",
    "ccRotationX": "controlled-controlled-rotation-x",
    "rotationY": "rotation-y",
    "cRotationY": "controlled-rotation-y",
    "ccRotationY": "controlled-controlled-rotation-y",
    "rotationZ": "rotation-z",
    "cRotationZ": "controlled-rotation-z",
    "ccRotationZ": "controlled-controlled-rotation-z",
    "rotationSwap": "rotation-swap",
    "cRotationSwap": "controlled-rotation-swap",
    "ccRotationSwap": "controlled-controlled-rotation-swap",
}

__all__ = [
    "hadamard",
    "cHadamard",
    "ccHadamard",
    "pauliX",
    "cPauliX",
    "ccPauliX",
    "pauliY",
    "cPauliY",
    "ccPauliY",
    "pauliZ",
    "cPauliZ",
    "ccPauliZ",
    "phase",
    "cPhase",
    "ccPhase",
    "phaseDagger",
    "cPhaseDagger",
    "ccPhaseDagger",
    "phaseRoot",
    "cPhaseRoot",
    "ccPhaseRoot",
    "phaseRootDagger",
    "cPhaseRootDagger",
    "ccPhaseRootDagger",
    "pauliXRoot",
    "cPauliXRoot",
    "ccPauliXRoot",
    "swap",
    "cSwap",
    "ccSwap",
    "swapRoot",
    "cSwapRoot",
    "ccSwapRoot",
    "rotationHadamard",
    "cRotationHadamard",
    "ccRotationHadamard",
    "rotationPauliX",
    "cRotationPauliX",
    "ccRotationPauliX",
    "rotationPauliY",
    "cRotationPauliY",
    "ccRotationPauliY",
    "rotationPauliZ",
    "cRotationPauliZ",
    "ccRotationPauliZ",
    "rotationX",
    "cRotationX",
    "ccRotationX",
    "rotationY",
    "cRotationY",
    "ccRotationY",
    "rotationZ",
    "cRotationZ",
    "ccRotationZ",
    "rotationSwap",
    "cRotationSwap",
    "ccRotationSwap",
]
