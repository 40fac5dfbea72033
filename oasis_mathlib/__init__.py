################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vector and quaternion algebra for OASIS."""

from __future__ import annotations

from oasis_mathlib.config.mathlib_params import FormatParams
from oasis_mathlib.config.mathlib_params import MathlibParams
from oasis_mathlib.config.mathlib_params import MathlibParamsError
from oasis_mathlib.config.mathlib_params import ToleranceParams
from oasis_mathlib.math_utils.errors import ComponentRangeError
from oasis_mathlib.math_utils.errors import ContractViolationError
from oasis_mathlib.math_utils.errors import DegenerateInputError
from oasis_mathlib.math_utils.errors import DimensionMismatchError
from oasis_mathlib.math_utils.errors import LengthMismatchError
from oasis_mathlib.math_utils.errors import ScalarTypeError
from oasis_mathlib.math_utils.errors import TextFormatError
from oasis_mathlib.math_utils.fixed_vector import ComponentLoader
from oasis_mathlib.math_utils.fixed_vector import ComponentRef
from oasis_mathlib.math_utils.fixed_vector import FixedVector
from oasis_mathlib.math_utils.fixed_vector import vector_type
from oasis_mathlib.math_utils.quat import Quaternion
from oasis_mathlib.math_utils.quat import Quaterniond
from oasis_mathlib.math_utils.quat import Quaternionf
from oasis_mathlib.math_utils.quat import quaternion_type
from oasis_mathlib.math_utils.text_format import parse
from oasis_mathlib.math_utils.text_format import render
from oasis_mathlib.math_utils.text_format import to_string
from oasis_mathlib.math_utils.vector_types import Vector1d
from oasis_mathlib.math_utils.vector_types import Vector1f
from oasis_mathlib.math_utils.vector_types import Vector1i
from oasis_mathlib.math_utils.vector_types import Vector1u
from oasis_mathlib.math_utils.vector_types import Vector2d
from oasis_mathlib.math_utils.vector_types import Vector2f
from oasis_mathlib.math_utils.vector_types import Vector2i
from oasis_mathlib.math_utils.vector_types import Vector2u
from oasis_mathlib.math_utils.vector_types import Vector3d
from oasis_mathlib.math_utils.vector_types import Vector3f
from oasis_mathlib.math_utils.vector_types import Vector3i
from oasis_mathlib.math_utils.vector_types import Vector3u


__all__ = [
    "ComponentLoader",
    "ComponentRangeError",
    "ComponentRef",
    "ContractViolationError",
    "DegenerateInputError",
    "DimensionMismatchError",
    "FixedVector",
    "FormatParams",
    "LengthMismatchError",
    "MathlibParams",
    "MathlibParamsError",
    "Quaternion",
    "Quaterniond",
    "Quaternionf",
    "ScalarTypeError",
    "TextFormatError",
    "ToleranceParams",
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
    "parse",
    "quaternion_type",
    "render",
    "to_string",
    "vector_type",
]
