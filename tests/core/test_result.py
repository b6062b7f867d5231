"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pybasicstats.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"n": 3},
            timing=None,
            backend_name="cpu_test",
        )
        assert result.params.value == 42.0
        assert result.info == {"n": 3}
        assert result.timing is None
        assert result.backend_name == "cpu_test"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert result.warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="x",
            warnings=("median is positional and data is not sorted ascending",),
        )
        assert result.has_warning("not sorted")
        assert not result.has_warning("-0.0")

    def test_no_warnings(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert not result.has_warning("anything")
