import os
import re
import sys
import types
from unittest import mock

import pytest

import qukit_cli
from qukit.bindgen import generate
from qukit.engine import RecordingEngine, bind_engine


@pytest.fixture(autouse=True)
def _isolated_engine():
    saved = bind_engine(None)
    yield
    bind_engine(saved)


def test_list_prints_every_binding(capsys):
    assert qukit_cli.main(["list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 57
    assert re.match(r"^hadamard\s+hadamard$", out[0])
    assert any(re.match(r"^ccPauliX\s+controlled-controlled-pauli-x$", line) for line in out)


def test_generate_writes_bindings(tmp_path, capsys):
    with mock.patch.object(qukit_cli, "generate", lambda: generate(tmp_path)):
        assert qukit_cli.main(["generate"]) == 0
    assert (tmp_path / "controlled_controlled_swap_root.py").is_file()
    assert (tmp_path / "__init__.py").is_file()
    assert "Wrote 58 files" in capsys.readouterr().out


def test_generate_takes_no_flags():
    with pytest.raises(SystemExit):
        qukit_cli.main(["generate", "--output", "elsewhere"])


def test_check_engine_unavailable(capsys):
    with mock.patch.dict(os.environ, {"QUKIT_ENGINE": "qukit_tests_no_such_engine"}):
        assert qukit_cli.main(["check-engine"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_check_engine_incomplete(capsys):
    partial = types.ModuleType("partial_cli_engine")
    partial.hadamard = lambda qbit: None
    with mock.patch.dict(sys.modules, {"partial_cli_engine": partial}), \
            mock.patch.dict(os.environ, {"QUKIT_ENGINE": "partial_cli_engine"}):
        assert qukit_cli.main(["check-engine"]) == 1
    out = capsys.readouterr().out
    assert "Missing" in out
    assert "reset_same_step" in out


def test_check_engine_complete(capsys):
    with mock.patch.dict(sys.modules, {"recording_cli_engine": RecordingEngine()}), \
            mock.patch.dict(os.environ, {"QUKIT_ENGINE": "recording_cli_engine"}):
        assert qukit_cli.main(["check-engine"]) == 0
    assert "All entry points present." in capsys.readouterr().out
