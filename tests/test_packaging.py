"""
Packaging tests: canonical imports, CLI syntax and setup.py metadata.

    python -m unittest tests.test_packaging -v
"""

import ast
import os
import sys
import unittest

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)


class TestCanonicalImports(unittest.TestCase):
    """Public symbols must be importable from the qukit package."""

    def test_import_generated_gates(self):
        from qukit import hadamard, cPauliX, ccSwapRoot, rotationZ, cRotationSwap
        self.assertTrue(callable(hadamard))

    def test_import_hand_authored(self):
        from qukit import measurement, reset, rotationU, cRotationU, ccRotationU
        self.assertTrue(callable(measurement))

    def test_all_is_resolvable(self):
        import qukit
        for name in qukit.__all__:
            self.assertTrue(hasattr(qukit, name), name)

    def test_importing_does_not_load_engine(self):
        from qukit import engine
        saved = engine.bind_engine(None)
        try:
            import qukit  # noqa: F401
            self.assertIsNone(engine._ENGINE)
        finally:
            engine.bind_engine(saved)


class TestCliImportSyntax(unittest.TestCase):
    def test_cli_parses_cleanly(self):
        cli_path = os.path.join(_PROJECT_ROOT, "qukit_cli.py")
        with open(cli_path, "r", encoding="utf-8") as f:
            source = f.read()
        tree = ast.parse(source, filename="qukit_cli.py")
        self.assertIsNotNone(tree)


class TestSetupMetadata(unittest.TestCase):
    def _setup_keywords(self):
        path = os.path.join(_PROJECT_ROOT, "setup.py")
        with open(path, "r", encoding="utf-8") as f:
            tree = ast.parse(f.read(), filename="setup.py")
        for node in ast.walk(tree):
            if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup":
                return {kw.arg: kw.value for kw in node.keywords}
        self.fail("setup() call not found")

    def test_setup_has_name(self):
        keywords = self._setup_keywords()
        self.assertEqual(ast.literal_eval(keywords["name"]), "qukit")

    def test_setup_declares_numpy(self):
        keywords = self._setup_keywords()
        self.assertIn("numpy", ast.literal_eval(keywords["install_requires"]))


if __name__ == "__main__":
    unittest.main()
