"""
Native engine binding tests.

No compiled engine is required; fake engine modules are injected into
sys.modules.

    python -m unittest tests.test_engine -v
"""

import os
import sys
import types
import unittest
from unittest import mock

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from qukit.engine import (
    HAND_AUTHORED_ENTRY_POINTS,
    RecordingEngine,
    bind_engine,
    entry_points,
    get_engine,
    load_engine,
    missing_entry_points,
    native,
    unbind_engine,
    use_engine,
)
from qukit.errors import EngineUnavailableError


def _complete_engine_module(name):
    module = types.ModuleType(name)
    for verb in entry_points():
        setattr(module, verb, lambda *args: None)
    return module


class EngineTestCase(unittest.TestCase):
    def setUp(self):
        self._saved = bind_engine(None)

    def tearDown(self):
        bind_engine(self._saved)


# ===================================================================
# 1. Binding
# ===================================================================
class TestBinding(EngineTestCase):
    def test_bind_returns_previous(self):
        first, second = RecordingEngine(), RecordingEngine()
        self.assertIsNone(bind_engine(first))
        self.assertIs(bind_engine(second), first)
        self.assertIs(get_engine(), second)

    def test_use_engine_restores_previous(self):
        outer, inner = RecordingEngine(), RecordingEngine()
        bind_engine(outer)
        with use_engine(inner):
            self.assertIs(get_engine(), inner)
        self.assertIs(get_engine(), outer)

    def test_use_engine_restores_on_error(self):
        outer = RecordingEngine()
        bind_engine(outer)
        with self.assertRaises(KeyError):
            with use_engine(RecordingEngine()):
                raise KeyError("boom")
        self.assertIs(get_engine(), outer)

    def test_native_proxy_resolves_at_call_time(self):
        first, second = RecordingEngine(), RecordingEngine()
        with use_engine(first):
            native.hadamard(0)
        with use_engine(second):
            native.hadamard(1)
        self.assertEqual(first.verbs(), ["hadamard"])
        self.assertEqual(second.verbs(), ["hadamard"])

    def test_native_proxy_hides_private_names(self):
        with self.assertRaises(AttributeError):
            native._handle


# ===================================================================
# 2. Loading
# ===================================================================
class TestLoading(EngineTestCase):
    def test_unknown_module_raises(self):
        with self.assertRaises(EngineUnavailableError):
            load_engine("qukit_tests_no_such_engine")

    def test_configured_module_is_loaded_lazily(self):
        fake = _complete_engine_module("fake_qukit_engine")
        with mock.patch.dict(sys.modules, {"fake_qukit_engine": fake}), \
                mock.patch.dict(os.environ, {"QUKIT_ENGINE": "fake_qukit_engine"}):
            unbind_engine()
            self.assertIs(get_engine(), fake)

    def test_missing_configured_engine(self):
        with mock.patch.dict(os.environ, {"QUKIT_ENGINE": "qukit_tests_no_such_engine"}):
            unbind_engine()
            with self.assertRaises(EngineUnavailableError) as ctx:
                native.hadamard(0)
        self.assertIn("QUKIT_ENGINE", str(ctx.exception))

    def test_incomplete_engine_logs_warning(self):
        partial = types.ModuleType("partial_qukit_engine")
        partial.hadamard = lambda qbit: None
        with mock.patch.dict(sys.modules, {"partial_qukit_engine": partial}):
            with self.assertLogs("qukit.engine", level="WARNING") as logs:
                self.assertIs(load_engine("partial_qukit_engine"), partial)
        self.assertTrue(any("measurement_z" in line for line in logs.output))


# ===================================================================
# 3. Capability interface
# ===================================================================
class TestEntryPoints(unittest.TestCase):
    def test_entry_points_include_hand_authored(self):
        verbs = entry_points()
        for verb in HAND_AUTHORED_ENTRY_POINTS:
            self.assertIn(verb, verbs)
        self.assertEqual(len(verbs), len(set(verbs)))

    def test_missing_entry_points(self):
        restricted = RecordingEngine(verbs=["hadamard"])
        missing = missing_entry_points(restricted)
        self.assertNotIn("hadamard", missing)
        self.assertIn("hadamard_same_step", missing)
        self.assertEqual(missing_entry_points(RecordingEngine()), [])

    def test_restricted_recorder_rejects_unknown_verbs(self):
        restricted = RecordingEngine(verbs=["hadamard"])
        with self.assertRaises(AttributeError):
            restricted.teleport(0, 1)

    def test_recorder_clear(self):
        recorder = RecordingEngine()
        recorder.reset(0)
        recorder.clear()
        self.assertEqual(recorder.calls, [])


if __name__ == "__main__":
    unittest.main()
