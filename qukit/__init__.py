# qukit Main Entry Point
# This file makes the `qukit` directory a Python package and exposes the public API.

"""
qukit

Python bindings for the qukit native amplitude-simulation engine. Every gate
function accepts single qbit handles or collections of handles and forwards
one native call per handle tuple.
"""

# Public API Imports
from .errors import QukitError, TypeMismatch, CatalogError, EngineUnavailableError
from .engine import (
    NativeCall,
    RecordingEngine,
    bind_engine,
    entry_points,
    get_engine,
    load_engine,
    missing_entry_points,
    unbind_engine,
    use_engine,
)
from .gates import *  # noqa: F401,F403
from .gates import ARTIFACTS, __all__ as _gate_names
from .measurement import MeasurementBasis, measurement
from .reset import reset
from .rotation_u import rotationU, cRotationU, ccRotationU

__version__ = "0.1.0"

__all__ = [
    "QukitError",
    "TypeMismatch",
    "CatalogError",
    "EngineUnavailableError",
    "NativeCall",
    "RecordingEngine",
    "bind_engine",
    "entry_points",
    "get_engine",
    "load_engine",
    "missing_entry_points",
    "unbind_engine",
    "use_engine",
    "ARTIFACTS",
    "MeasurementBasis",
    "measurement",
    "reset",
    "rotationU",
    "cRotationU",
    "ccRotationU",
    *_gate_names,
]
