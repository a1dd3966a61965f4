"""
Generated gate dispatchers driven against a recording engine.
"""

import importlib

import numpy as np
import pytest

import qukit
from qukit.bindgen import expand_catalog, native_name
from qukit.engine import NativeCall, RecordingEngine, use_engine
from qukit.errors import TypeMismatch


def test_broadcast_truncates_to_shortest(engine):
    qukit.cHadamard(["a0", "a1", "a2"], ["t0", "t1", "t2", "t3", "t4"])
    assert engine.calls == [
        NativeCall("controlled_hadamard", ("a0", "t0")),
        NativeCall("controlled_hadamard", ("a1", "t1")),
        NativeCall("controlled_hadamard", ("a2", "t2")),
    ]


def test_empty_broadcast_is_a_no_op(engine):
    assert qukit.hadamard([]) is None
    qukit.cPauliX([], [0, 1])
    qukit.ccSwap([0], [1], [], [3])
    assert engine.calls == []


def test_shape_mismatch_issues_no_call(engine):
    with pytest.raises(TypeMismatch):
        qukit.cPauliX("a", ["h0", "h1"])
    with pytest.raises(TypeMismatch):
        qukit.swap([0, 1], 2)
    assert engine.calls == []


def test_nested_mismatch_keeps_earlier_calls(engine):
    with pytest.raises(TypeMismatch):
        qukit.cPauliX([0, [1]], [2, 3])
    assert engine.calls == [NativeCall("controlled_pauli_x", (0, 2))]


@pytest.mark.parametrize("c_control, same_step, verb", [
    (None, False, "hadamard"),
    (None, True, "hadamard_same_step"),
    ("b0", False, "hadamard_classically_controlled"),
    ("b0", True, "hadamard_same_step_classically_controlled"),
])
def test_variant_selection(engine, c_control, same_step, verb):
    qukit.hadamard("q0", c_control=c_control, same_step=same_step)
    expected_args = ("q0",) if c_control is None else ("q0", c_control)
    assert engine.calls == [NativeCall(verb, expected_args)]


def test_controlled_variants_take_no_classical_condition():
    with pytest.raises(TypeError):
        qukit.cHadamard("c", "q", c_control="b0")


def test_single_control_fan_out_order(engine):
    qukit.cPauliX(["A", "A"], ["h0", "h1"])
    assert engine.calls == [
        NativeCall("controlled_pauli_x", ("A", "h0")),
        NativeCall("controlled_pauli_x", ("A", "h1")),
    ]


def test_condition_and_step_pass_through_fan_out(engine):
    qukit.pauliZ([0, 1], c_control="b", same_step=True)
    assert engine.verbs() == ["pauli_z_same_step_classically_controlled"] * 2
    assert [call.args for call in engine.calls] == [(0, "b"), (1, "b")]


def test_rotation_angle_is_threaded(engine):
    qukit.cRotationY(0.125, [0, 1, 2], [3, 4, 5], same_step=True)
    assert engine.calls == [
        NativeCall("controlled_rotation_y_same_step", (0.125, 0, 3)),
        NativeCall("controlled_rotation_y_same_step", (0.125, 1, 4)),
        NativeCall("controlled_rotation_y_same_step", (0.125, 2, 5)),
    ]


def test_two_qbit_gate_with_two_controls(engine):
    qukit.ccRotationSwap(1.5, "c0", "c1", "t0", "t1")
    assert engine.calls == [
        NativeCall("controlled_controlled_rotation_swap", (1.5, "c0", "c1", "t0", "t1")),
    ]


def test_numpy_collections(engine):
    qukit.pauliX(np.arange(3))
    assert engine.verbs() == ["pauli_x"] * 3
    assert [int(call.args[0]) for call in engine.calls] == [0, 1, 2]


def test_nested_collections_recurse(engine):
    qukit.swap([[0, 1], [2]], [[3, 4], [5, 6]])
    assert [call.args for call in engine.calls] == [(0, 3), (1, 4), (2, 5)]


def test_every_generated_function_reaches_its_engine_verb():
    for artifact in expand_catalog():
        descriptor = artifact.descriptor
        args = [0.25] if descriptor.rotation else []
        args += list(range(artifact.controls + descriptor.arity))
        recorder = RecordingEngine()
        with use_engine(recorder):
            getattr(qukit, artifact.function_name)(*args)
        verb = native_name(descriptor.name, artifact.controls)
        assert recorder.calls == [NativeCall(verb, tuple(args))], artifact.function_name


def test_engine_faults_propagate_without_rollback():
    class FlakyEngine:
        def __init__(self):
            self.applied = []

        def hadamard(self, qbit):
            if qbit == 1:
                raise RuntimeError("engine fault")
            self.applied.append(qbit)

    flaky = FlakyEngine()
    with use_engine(flaky):
        with pytest.raises(RuntimeError, match="engine fault"):
            qukit.hadamard([0, 1, 2])
    assert flaky.applied == [0]


def test_manifest_exports_every_artifact():
    assert set(qukit.ARTIFACTS) == {a.function_name for a in expand_catalog()}
    for func_name, artifact in qukit.ARTIFACTS.items():
        module = importlib.import_module("qukit.gates." + artifact.replace("-", "_"))
        assert module.ARTIFACT == artifact
        assert getattr(module, func_name) is getattr(qukit, func_name)
