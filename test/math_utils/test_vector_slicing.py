################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for head, tail and segment slicing."""

from __future__ import annotations

import numpy as np
import pytest

from oasis_mathlib.math_utils.errors import DimensionMismatchError
from oasis_mathlib.math_utils.fixed_vector import FixedVector
from oasis_mathlib.math_utils.fixed_vector import vector_type
from oasis_mathlib.math_utils.vector_types import Vector2i
from oasis_mathlib.math_utils.vector_types import Vector3d


Vector6d: type = vector_type(6, np.float64)


def _six() -> FixedVector:
    """Return the vector [1, 2, 3, 4, 5, 6]."""
    return Vector6d([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


def test_head() -> None:
    """Checks head returns the leading components."""
    assert _six().head(3) == Vector3d(1.0, 2.0, 3.0)


def test_tail() -> None:
    """Checks tail returns the trailing components."""
    assert _six().tail(3) == Vector3d(4.0, 5.0, 6.0)


def test_segment() -> None:
    """Checks segment returns components starting at an offset."""
    assert _six().segment(1, 3) == Vector3d(2.0, 3.0, 4.0)


def test_head_matches_leading_segment() -> None:
    """Checks head(n) equals segment(0, n)."""
    v: FixedVector = _six()
    assert v.head(3) == v.segment(0, 3)
    assert v.tail(2) == v.segment(4, 2)


def test_slice_types() -> None:
    """Checks slices are vectors of the requested size and same scalar type."""
    v: FixedVector = _six()
    assert type(v.head(3)) is Vector3d
    assert type(v.segment(2, 4)) is vector_type(4, np.float64)
    assert type(Vector2i(1, 2).tail(1)) is vector_type(1, np.int32)


def test_full_and_empty_slices() -> None:
    """Checks zero-length and full-length slices."""
    v: FixedVector = _six()
    assert len(v.head(0)) == 0
    assert len(v.tail(0)) == 0
    assert len(v.segment(6, 0)) == 0
    assert v.head(6) == v
    assert v.tail(6) == v


def test_slices_are_copies() -> None:
    """Checks writing to a slice leaves the source unchanged."""
    v: FixedVector = _six()
    head: FixedVector = v.head(3)
    head[0] = 100.0
    assert v[0] == 1.0


def test_slice_bounds_rejected() -> None:
    """Checks out-of-range slice shapes are rejected."""
    v: FixedVector = _six()
    with pytest.raises(DimensionMismatchError):
        v.head(7)
    with pytest.raises(DimensionMismatchError):
        v.tail(7)
    with pytest.raises(DimensionMismatchError):
        v.segment(4, 3)
    with pytest.raises(DimensionMismatchError):
        v.segment(-1, 2)
    with pytest.raises(DimensionMismatchError):
        v.head(-1)
    with pytest.raises(TypeError):
        v.head(1.5)


def test_slice_bounds_rejected_every_call() -> None:
    """Checks an invalid shape keeps failing after the first attempt."""
    v: FixedVector = _six()
    for _ in range(2):
        with pytest.raises(DimensionMismatchError):
            v.segment(5, 2)
