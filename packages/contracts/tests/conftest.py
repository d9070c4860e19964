"""Pytest configuration for dataknobs_contracts tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


class CallRecorder:
    """Contract that records every value it sees and returns a fixed answer."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.calls = []

    def is_valid(self, value):
        self.calls.append(value)
        return self.answer


@pytest.fixture
def accepting_recorder():
    """A recording contract that accepts everything."""
    return CallRecorder(True)


@pytest.fixture
def rejecting_recorder():
    """A recording contract that rejects everything."""
    return CallRecorder(False)


@pytest.fixture
def sample_values():
    """A spread of values of different kinds."""
    return [None, True, False, 0, 1, -1, 2.5, -0.5, "", "text", [], [1, 2], {}, {"a": 1}, (1,)]
