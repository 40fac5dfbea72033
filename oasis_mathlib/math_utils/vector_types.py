################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Named vector classes for the common sizes and scalar types."""

from __future__ import annotations

import numpy as np

from .fixed_vector import vector_type


# float32 components
Vector1f: type = vector_type(1, np.float32)
Vector2f: type = vector_type(2, np.float32)
Vector3f: type = vector_type(3, np.float32)

# float64 components
Vector1d: type = vector_type(1, np.float64)
Vector2d: type = vector_type(2, np.float64)
Vector3d: type = vector_type(3, np.float64)

# int32 components
Vector1i: type = vector_type(1, np.int32)
Vector2i: type = vector_type(2, np.int32)
Vector3i: type = vector_type(3, np.int32)

# uint32 components
Vector1u: type = vector_type(1, np.uint32)
Vector2u: type = vector_type(2, np.uint32)
Vector3u: type = vector_type(3, np.uint32)


__all__ = [
    "Vector1d",
    "Vector1f",
    "Vector1i",
    "Vector1u",
    "Vector2d",
    "Vector2f",
    "Vector2i",
    "Vector2u",
    "Vector3d",
    "Vector3f",
    "Vector3i",
    "Vector3u",
]
