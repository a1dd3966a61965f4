import os
import sys

import pytest

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from qukit.engine import RecordingEngine, entry_points, use_engine


@pytest.fixture
def engine():
    """Binds a recording engine that only accepts known entry points."""
    recorder = RecordingEngine(verbs=entry_points())
    with use_engine(recorder):
        yield recorder
