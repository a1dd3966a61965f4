from __future__ import annotations

import importlib
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .bindgen import native_entry_points
from .config import get_config
from .errors import EngineUnavailableError
from .logging import get_logger

logger = get_logger(__name__)

_MEASUREMENT_BASES = ("x", "y", "z")

HAND_AUTHORED_ENTRY_POINTS: Tuple[str, ...] = (
    "rotation_u",
    "rotation_u_same_step",
    "rotation_u_classically_controlled",
    "rotation_u_same_step_classically_controlled",
    "controlled_rotation_u",
    "controlled_rotation_u_same_step",
    "controlled_controlled_rotation_u",
    "controlled_controlled_rotation_u_same_step",
    *(f"measurement_{basis}" for basis in _MEASUREMENT_BASES),
    *(f"measurement_{basis}_same_step" for basis in _MEASUREMENT_BASES),
    "reset",
    "reset_same_step",
)

_ENGINE: Any = None


def entry_points() -> List[str]:
    """Every native verb qukit may call, generated bindings first."""
    return native_entry_points() + list(HAND_AUTHORED_ENTRY_POINTS)


def missing_entry_points(engine: Any) -> List[str]:
    return [verb for verb in entry_points() if not callable(getattr(engine, verb, None))]


def load_engine(module_name: Optional[str] = None) -> Any:
    """Imports the native engine module.

    Args:
        module_name: Dotted module path. Defaults to ``QUKIT_ENGINE`` or
            ``qukit_native``.

    Raises:
        EngineUnavailableError: If the module cannot be imported.
    """
    name = module_name or get_config().engine_module
    try:
        engine = importlib.import_module(name)
    except ImportError as e:
        raise EngineUnavailableError(
            f"Could not import native engine '{name}': {e}. "
            "Install the engine or point QUKIT_ENGINE at it."
        ) from e

    missing = missing_entry_points(engine)
    if missing:
        logger.warning("Engine '%s' lacks %d entry point(s): %s", name, len(missing), ", ".join(missing))
    logger.info("Loaded native engine '%s'", name)
    return engine


def bind_engine(engine: Any) -> Any:
    """Binds ``engine`` as the target of every gate call. Returns the previous binding."""
    global _ENGINE
    previous, _ENGINE = _ENGINE, engine
    return previous


def unbind_engine() -> None:
    bind_engine(None)


def get_engine() -> Any:
    """Returns the bound engine, loading the configured one on first use."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = load_engine()
    return _ENGINE


@contextmanager
def use_engine(engine: Any) -> Iterator[Any]:
    """Temporarily binds ``engine``; the previous binding is restored on exit."""
    previous = bind_engine(engine)
    try:
        yield engine
    finally:
        bind_engine(previous)


class _NativeProxy:
    """Resolves ``native.<verb>`` against the engine bound at call time."""

    def __getattr__(self, verb: str):
        if verb.startswith("_"):
            raise AttributeError(verb)
        return getattr(get_engine(), verb)

    def __repr__(self) -> str:
        return "<qukit native engine proxy>"


native = _NativeProxy()


@dataclass(frozen=True)
class NativeCall:
    verb: str
    args: Tuple[Any, ...]


class RecordingEngine:
    """
    A pure-Python engine that records every entry point call in order.

    It applies nothing; it lets the bindings run without the native engine
    and makes the issued call sequence observable.

    Usage Example:
        >>> engine = RecordingEngine()
        >>> with use_engine(engine):
        ...     qukit.hadamard([0, 1])
        >>> [call.verb for call in engine.calls]
        ['hadamard', 'hadamard']
    """

    def __init__(self, verbs: Optional[Iterable[str]] = None):
        self.calls: List[NativeCall] = []
        self._verbs = frozenset(verbs) if verbs is not None else None

    def __getattr__(self, verb: str):
        if verb.startswith("_"):
            raise AttributeError(verb)
        if self._verbs is not None and verb not in self._verbs:
            raise AttributeError(f"Native engine has no entry point '{verb}'.")

        def entry_point(*args):
            logger.debug("native %s%r", verb, args)
            self.calls.append(NativeCall(verb, args))

        entry_point.__name__ = verb
        return entry_point

    def clear(self) -> None:
        self.calls.clear()

    def verbs(self) -> List[str]:
        return [call.verb for call in self.calls]
