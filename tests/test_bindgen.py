"""
Binding generator tests: naming, expansion, rendering and file output.

    python -m pytest tests/test_bindgen.py -v
"""

import os
import re
import sys
import tempfile
import unittest
from pathlib import Path

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from qukit import bindgen
from qukit.bindgen import (
    GENERATED_HEADER,
    MANIFEST_FILE,
    artifact_name,
    control_params,
    expand_catalog,
    function_name,
    generate,
    module_name,
    native_entry_points,
    native_name,
    render_manifest,
    target_params,
)
from qukit.catalog import CONTROL_LEVELS, GATE_CATALOG, GateDescriptor
from qukit.errors import CatalogError

_GATES_DIR = Path(_PROJECT_ROOT) / "qukit" / "gates"


def _read_tree(directory):
    return {p.name: p.read_bytes() for p in sorted(Path(directory).glob("*.py"))}


# ===================================================================
# 1. Naming
# ===================================================================
class TestNaming(unittest.TestCase):
    def test_function_names(self):
        self.assertEqual(function_name("hadamard", 0), "hadamard")
        self.assertEqual(function_name("hadamard", 1), "cHadamard")
        self.assertEqual(function_name("hadamard", 2), "ccHadamard")
        self.assertEqual(function_name("pauli_x_root", 0), "pauliXRoot")
        self.assertEqual(function_name("pauli_x_root", 1), "cPauliXRoot")
        self.assertEqual(function_name("rotation_swap", 2), "ccRotationSwap")

    def test_artifact_names(self):
        self.assertEqual(artifact_name("pauli_x", 0), "pauli-x")
        self.assertEqual(artifact_name("pauli_x", 1), "controlled-pauli-x")
        self.assertEqual(artifact_name("swap_root", 2), "controlled-controlled-swap-root")

    def test_module_and_native_names(self):
        self.assertEqual(module_name("swap_root", 2), "controlled_controlled_swap_root")
        self.assertEqual(native_name("swap_root", 0), "swap_root")
        self.assertEqual(native_name("swap_root", 1), "controlled_swap_root")
        self.assertEqual(native_name("swap_root", 2), "controlled_controlled_swap_root")

    def test_single_control_is_unindexed(self):
        self.assertEqual(control_params(0), [])
        self.assertEqual(control_params(1), ["c_qbits"])
        self.assertEqual(control_params(2), ["c_qbits0", "c_qbits1"])

    def test_target_params(self):
        self.assertEqual(target_params(1), ["qbits"])
        self.assertEqual(target_params(2), ["qbits0", "qbits1"])


# ===================================================================
# 2. Catalog expansion
# ===================================================================
class TestExpansion(unittest.TestCase):
    def test_one_artifact_per_gate_and_control_level(self):
        artifacts = expand_catalog()
        self.assertEqual(len(artifacts), len(GATE_CATALOG) * len(CONTROL_LEVELS))
        pairs = [(a.descriptor.name, a.controls) for a in artifacts]
        expected = [(d.name, c) for d in GATE_CATALOG for c in CONTROL_LEVELS]
        self.assertEqual(pairs, expected)

    def test_derived_names_are_unique(self):
        artifacts = expand_catalog()
        for attr in ("function_name", "artifact_name", "module_name"):
            names = [getattr(a, attr) for a in artifacts]
            self.assertEqual(len(names), len(set(names)), attr)

    def test_names_follow_from_gate_and_control_level(self):
        for a in expand_catalog():
            self.assertEqual(a.function_name, function_name(a.descriptor.name, a.controls))
            self.assertEqual(a.artifact_name, artifact_name(a.descriptor.name, a.controls))

    def test_sources_compile(self):
        for a in expand_catalog():
            compile(a.source, a.file_name, "exec")
        compile(render_manifest(expand_catalog()), MANIFEST_FILE, "exec")

    def test_rotation_signature(self):
        by_name = {a.function_name: a for a in expand_catalog()}
        self.assertIn("def rotationX(theta, qbits, c_control=None, same_step=False):",
                      by_name["rotationX"].source)
        self.assertIn("def ccSwap(c_qbits0, c_qbits1, qbits0, qbits1, same_step=False):",
                      by_name["ccSwap"].source)
        self.assertNotIn("c_control", by_name["cRotationSwap"].source)

    def test_generated_calls_are_declared_entry_points(self):
        declared = set(native_entry_points())
        for a in expand_catalog():
            for verb in re.findall(r"native\.(\w+)\(", a.source):
                self.assertIn(verb, declared)

    def test_entry_point_count(self):
        # four variants at level 0, two at levels 1 and 2
        self.assertEqual(len(native_entry_points()), len(GATE_CATALOG) * 8)


# ===================================================================
# 3. Catalog authoring errors
# ===================================================================
class TestCatalogErrors(unittest.TestCase):
    def _assert_rejected(self, catalog):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "gates"
            with self.assertRaises(CatalogError):
                generate(out, catalog=catalog)
            self.assertFalse(out.exists())

    def test_bad_arity(self):
        self._assert_rejected([GateDescriptor("hadamard"), GateDescriptor("toffoli", 3)])

    def test_bool_arity(self):
        self._assert_rejected([GateDescriptor("hadamard", True)])

    def test_bad_name(self):
        self._assert_rejected([GateDescriptor("PauliX", 1)])
        self._assert_rejected([GateDescriptor("pauli-x", 1)])

    def test_bad_rotation_flag(self):
        self._assert_rejected([GateDescriptor("rotation_x", 1, rotation="yes")])

    def test_duplicate_name(self):
        self._assert_rejected([GateDescriptor("swap", 2), GateDescriptor("swap", 2)])

    def test_non_descriptor_entry(self):
        self._assert_rejected([("hadamard", 1, False)])


# ===================================================================
# 4. File output
# ===================================================================
class TestGenerate(unittest.TestCase):
    def test_generation_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            generate(tmp)
            first = _read_tree(tmp)
            generate(tmp)
            second = _read_tree(tmp)
        self.assertEqual(first, second)
        self.assertEqual(len(first), len(GATE_CATALOG) * len(CONTROL_LEVELS) + 1)

    def test_manifest_written_last(self):
        with tempfile.TemporaryDirectory() as tmp:
            paths = generate(tmp)
        self.assertEqual(paths[-1].name, MANIFEST_FILE)

    def test_stale_generated_files_are_removed(self):
        with tempfile.TemporaryDirectory() as tmp:
            stale = Path(tmp) / "controlled_toffoli.py"
            stale.write_text(GENERATED_HEADER + "\n", encoding="utf-8")
            handwritten = Path(tmp) / "notes.py"
            handwritten.write_text("# kept\n", encoding="utf-8")
            generate(tmp)
            self.assertFalse(stale.exists())
            self.assertTrue(handwritten.exists())

    def test_checked_in_bindings_are_current(self):
        expected = {a.file_name: a.source for a in expand_catalog()}
        expected[MANIFEST_FILE] = render_manifest(expand_catalog())
        for file_name, source in expected.items():
            with open(_GATES_DIR / file_name, "r", encoding="utf-8", newline="") as f:
                self.assertEqual(f.read(), source, file_name)

    def test_default_output_dir_is_gates_package(self):
        self.assertEqual(bindgen.DEFAULT_OUTPUT_DIR.resolve(), _GATES_DIR.resolve())


if __name__ == "__main__":
    unittest.main()
