"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pymatrix
from pymatrix.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={"method": "test"},
        timing={"total_seconds": 0.01},
        backend_name="cpu",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# Construction and immutability
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _make()
        assert result.params.value == 1.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_timing_optional(self):
        assert _make(timing=None).timing is None

    def test_frozen(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


# ═══════════════════════════════════════════════════════════════════════
# Defaults
# ═══════════════════════════════════════════════════════════════════════


class TestResultDefaults:

    def test_warnings_default_empty(self):
        assert _make().warnings == ()

    def test_provenance_keys(self):
        prov = _make().provenance
        assert set(prov) == {"pymatrix_version", "numpy_version", "python_version"}

    def test_provenance_versions(self):
        prov = _default_provenance()
        assert prov["pymatrix_version"] == pymatrix.__version__
        assert prov["numpy_version"] == np.__version__


class TestHasWarning:

    def test_substring_match(self):
        result = _make(warnings=("A is singular (rank 2 of 3)",))
        assert result.has_warning("singular")
        assert not result.has_warning("converge")

    def test_no_warnings(self):
        assert not _make().has_warning("singular")
