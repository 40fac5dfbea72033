################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the named vector classes."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from oasis_mathlib.math_utils import vector_types
from oasis_mathlib.math_utils.fixed_vector import FixedVector
from oasis_mathlib.math_utils.fixed_vector import vector_type


NAMED_TYPES: list[tuple[str, int, Any]] = [
    ("Vector1d", 1, np.float64),
    ("Vector2d", 2, np.float64),
    ("Vector3d", 3, np.float64),
    ("Vector1f", 1, np.float32),
    ("Vector2f", 2, np.float32),
    ("Vector3f", 3, np.float32),
    ("Vector1i", 1, np.int32),
    ("Vector2i", 2, np.int32),
    ("Vector3i", 3, np.int32),
    ("Vector1u", 1, np.uint32),
    ("Vector2u", 2, np.uint32),
    ("Vector3u", 3, np.uint32),
]


@pytest.mark.parametrize("name,size,dtype", NAMED_TYPES)
def test_named_type(name: str, size: int, dtype: Any) -> None:
    """Checks size, scalar type and class name of each alias."""
    cls: type = getattr(vector_types, name)
    assert cls.size() == size
    assert cls.SIZE == size
    assert cls.DTYPE == np.dtype(dtype)
    assert cls.__name__ == name
    assert cls is vector_type(size, dtype)
    assert issubclass(cls, FixedVector)


@pytest.mark.parametrize("dtype", [np.float64, np.float32, np.int32, np.uint32])
def test_large_sizes(dtype: Any) -> None:
    """Checks arbitrary compile-time sizes."""
    cls: type = FixedVector[10, dtype]
    assert cls.size() == 10
    assert cls.DTYPE == np.dtype(dtype)
    assert FixedVector[200, np.float64].size() == 200


def test_class_per_size_and_type() -> None:
    """Checks each size and scalar type pair maps to exactly one class."""
    assert FixedVector[3, np.float64] is FixedVector[3, "float64"]
    assert FixedVector[3, np.float64] is not FixedVector[3, np.float32]
    assert FixedVector[3, np.float64] is not FixedVector[4, np.float64]


def test_uncommon_scalar_type_name() -> None:
    """Checks classes for other scalar types get descriptive names."""
    assert FixedVector[2, np.int16].__name__ == "Vector2_int16"
    assert FixedVector[2, np.uint64].DTYPE == np.dtype(np.uint64)


def test_class_getitem_requires_pair() -> None:
    """Checks FixedVector[...] takes a size and scalar type."""
    with pytest.raises(TypeError):
        FixedVector[3]
