# examples/bernstein_vazirani.py

"""
Bernstein-Vazirani with broadcast gate calls.

Builds the oracle circuit for a hidden bit string using collection operands,
and prints the native calls the bindings issue. By default the calls are
recorded; pass --native to send them to the engine named by QUKIT_ENGINE.
Handles are plain indices here; a real engine allocates its own.
"""

import os
import sys

# Add the project root to the Python path to allow for direct imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import qukit
from qukit.engine import RecordingEngine, get_engine, use_engine

HIDDEN = [True, True, False, True, False]


def build(qbits, bits, target):
    qukit.hadamard(target)
    qukit.pauliZ(target)

    qukit.hadamard(qbits)
    # One controlled-X per set bit, broadcast over the matching qbits.
    controls = [q for q, set_bit in zip(qbits, HIDDEN) if set_bit]
    qukit.cPauliX(controls, [target] * len(controls))
    qukit.hadamard(qbits)
    qukit.hadamard(target)

    qukit.measurement(qbits, bits)


def main():
    qbits = list(range(len(HIDDEN)))
    bits = list(range(len(HIDDEN)))
    target = len(HIDDEN)

    if "--native" in sys.argv:
        print(f"--> Running on native engine {get_engine()!r}")
        build(qbits, bits, target)
        return

    engine = RecordingEngine(verbs=qukit.entry_points())
    with use_engine(engine):
        build(qbits, bits, target)

    print(f"--> {len(engine.calls)} native calls issued:")
    for call in engine.calls:
        print(f"    {call.verb}{call.args}")


if __name__ == "__main__":
    main()
