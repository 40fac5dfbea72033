################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion utilities using the xyzw convention."""

from __future__ import annotations

import functools
import logging
from typing import Any
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..config.mathlib_params import ToleranceParams
from . import text_format
from .errors import DegenerateInputError
from .errors import DimensionMismatchError
from .errors import LengthMismatchError
from .errors import ScalarTypeError
from .fixed_vector import FixedVector
from .fixed_vector import resolve_dtype
from .fixed_vector import vector_type


_LOG: logging.Logger = logging.getLogger(__name__)


class Quaternion:
    """Quaternion stored as a 4-vector in xyzw order.

    Responsibility:
        Represent and compose 3D rotations on top of FixedVector storage.

    Data contract:
        - Components are (x, y, z, w); w is the scalar part and
          vec = (x, y, z) is the vector part.
        - The scalar type is floating point. Quaternion is float64;
          Quaternion[np.float32] returns the float32 class.
        - Quaternion() is the zero quaternion, which is not a rotation. Use
          identity() or from_axis_angle() for rotations.

    Conventions:
        Composition uses the Hamilton product:
            vec = v1 x v2 + w1 * v2 + w2 * v1
            w   = w1 * w2 - v1 . v2

        Applying q1 * q2 to a vector performs q2 first, then q1. Products
        are not renormalized, so long chains should call normalize().

        Vector rotation divides by the squared norm, which makes it correct
        for non-unit quaternions:
            v' = v + 2 * vec x (w * v + vec x v) / |q|^2

    Degenerate inputs:
        inverse(), rotation and normalization raise DegenerateInputError
        when the norm is below the degenerate_norm_eps of the optional
        ToleranceParams argument (DEGENERATE_NORM_EPS by default).
    """

    __slots__ = ("_coeffs",)

    __array_ufunc__ = None

    DTYPE: ClassVar[np.dtype] = np.dtype(np.float64)

    _coeffs: FixedVector

    def __class_getitem__(cls, dtype: DTypeLike) -> type:
        return quaternion_type(dtype)

    def __init__(self, *values: Any) -> None:
        vector4: type = vector_type(4, self.DTYPE)
        if not values:
            self._coeffs = vector4()
        elif len(values) == 1 and isinstance(values[0], Quaternion):
            self._check_operand(values[0])
            self._coeffs = values[0]._coeffs.copy()
        elif len(values) == 4:
            self._coeffs = vector4(*values)
        else:
            raise LengthMismatchError(
                f"{type(self).__name__} requires x, y, z, w components"
            )

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the identity quaternion (0, 0, 0, 1)."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(
        cls,
        axis: Any,
        angle: float,
        params: Optional[ToleranceParams] = None,
    ) -> Quaternion:
        """Create a rotation of angle radians about axis.

        The axis is normalized first, so only its direction matters.
        """
        unit_axis: FixedVector = cls._as_vector3(axis).normalized(params)
        half: Any = cls.DTYPE.type(angle) / 2
        q: Quaternion = cls()
        q.w = np.cos(half)
        q.set_vec(np.sin(half) * unit_axis)
        return q

    @classmethod
    def from_coeffs(cls, coeffs: Any) -> Quaternion:
        """Create a quaternion from a 4-vector or sequence in xyzw order."""
        if isinstance(coeffs, FixedVector):
            values: List[Any] = coeffs.tolist()
        else:
            values = list(coeffs)
        if len(values) != 4:
            raise LengthMismatchError(
                f"{cls.__name__} requires 4 coefficients, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def vector3_type(cls) -> type:
        """Return the 3-vector class matching this quaternion's scalar type."""
        return vector_type(3, cls.DTYPE)

    @classmethod
    def _as_vector3(cls, value: Any) -> FixedVector:
        if isinstance(value, FixedVector):
            if value.SIZE != 3:
                raise DimensionMismatchError(
                    f"Expected a 3-vector, got size {value.SIZE}"
                )
            if value.DTYPE != cls.DTYPE:
                raise ScalarTypeError(
                    f"Expected {cls.DTYPE.name} components, got {value.DTYPE.name}"
                )
            return value
        return cls.vector3_type()(value)

    @classmethod
    def _from_parts(cls, vec: FixedVector, w: Any) -> Quaternion:
        q: Quaternion = cls()
        q.set_vec(vec)
        q.w = w
        return q

    def _check_operand(self, other: Quaternion) -> None:
        if other.DTYPE != self.DTYPE:
            raise ScalarTypeError(
                f"Quaternion scalar types differ: {self.DTYPE.name} and "
                f"{other.DTYPE.name}"
            )

    def _nonzero_squared_norm(
        self, params: Optional[ToleranceParams], operation: str
    ) -> Any:
        tolerance: ToleranceParams = params if params is not None else ToleranceParams()
        eps: float = tolerance.degenerate_norm_eps
        squared_norm: Any = self.squared_norm()
        if squared_norm < eps * eps:
            _LOG.debug("Rejecting %s of degenerate quaternion %r", operation, self)
            raise DegenerateInputError(
                f"Cannot {operation} a quaternion with squared norm {squared_norm}"
            )
        return squared_norm

    #
    # Access
    #

    @property
    def x(self) -> Any:
        return self._coeffs[0]

    @x.setter
    def x(self, value: Any) -> None:
        self._coeffs[0] = value

    @property
    def y(self) -> Any:
        return self._coeffs[1]

    @y.setter
    def y(self, value: Any) -> None:
        self._coeffs[1] = value

    @property
    def z(self) -> Any:
        return self._coeffs[2]

    @z.setter
    def z(self, value: Any) -> None:
        self._coeffs[2] = value

    @property
    def w(self) -> Any:
        """Scalar part, the fourth component."""
        return self._coeffs[3]

    @w.setter
    def w(self, value: Any) -> None:
        self._coeffs[3] = value

    def vec(self) -> FixedVector:
        """Return a copy of the vector part (x, y, z)."""
        return self._coeffs.head(3)

    def set_vec(self, vec: Any) -> None:
        """Overwrite the vector part (x, y, z) in place."""
        values: FixedVector = self._as_vector3(vec)
        self._coeffs[0] = values[0]
        self._coeffs[1] = values[1]
        self._coeffs[2] = values[2]

    def coeffs(self) -> FixedVector:
        """Return a copy of the components as a 4-vector in xyzw order."""
        return self._coeffs.copy()

    def angle(self) -> Any:
        """Return the rotation angle in radians, in [0, 2*pi]."""
        return 2 * np.arctan2(self.vec().norm(), self.w)

    def axis(self) -> FixedVector:
        """Return the unit rotation axis.

        A quaternion without a vector part has no defined axis; the X unit
        axis is returned when the squared norm of vec is below the machine
        epsilon of the scalar type.
        """
        vec: FixedVector = self.vec()
        if vec.squared_norm() < np.finfo(self.DTYPE).eps:
            _LOG.debug("Quaternion %r has no rotation axis, using X", self)
            return self.vector3_type()(1.0, 0.0, 0.0)
        return vec.normalized()

    #
    # Algebra
    #

    def squared_norm(self) -> Any:
        """Return the squared norm of all four components."""
        return self._coeffs.squared_norm()

    def norm(self) -> Any:
        """Return the norm of all four components."""
        return self._coeffs.norm()

    def normalize(self, params: Optional[ToleranceParams] = None) -> None:
        """Scale this quaternion in place to unit norm."""
        self._coeffs.normalize(params)

    def normalized(self, params: Optional[ToleranceParams] = None) -> Quaternion:
        """Return a unit-norm copy."""
        q: Quaternion = self.copy()
        q.normalize(params)
        return q

    def conjugate(self) -> Quaternion:
        """Return the conjugate quaternion (-vec, w)."""
        return self._from_parts(-self.vec(), self.w)

    def inverse(self, params: Optional[ToleranceParams] = None) -> Quaternion:
        """Return the inverse, conj(q) / |q|^2.

        For a unit quaternion this equals the conjugate.
        """
        squared_norm: Any = self._nonzero_squared_norm(params, "invert")
        return self._from_parts(-self.vec() / squared_norm, self.w / squared_norm)

    def rotate(
        self, v: Any, params: Optional[ToleranceParams] = None
    ) -> FixedVector:
        """Rotate a 3-vector by this quaternion."""
        vector: FixedVector = self._as_vector3(v)
        squared_norm: Any = self._nonzero_squared_norm(params, "rotate by")
        vec: FixedVector = self.vec()
        return vector + 2 * vec.cross(self.w * vector + vec.cross(vector)) / squared_norm

    def __mul__(self, other: Any) -> Any:
        """Compose with a quaternion, or rotate a 3-vector."""
        if isinstance(other, Quaternion):
            self._check_operand(other)
            v1: FixedVector = self.vec()
            v2: FixedVector = other.vec()
            w1: Any = self.w
            w2: Any = other.w
            return self._from_parts(
                v1.cross(v2) + w1 * v2 + w2 * v1,
                w1 * w2 - v1.dot(v2),
            )
        if isinstance(other, FixedVector):
            return self.rotate(other)
        return NotImplemented

    #
    # Comparison and conversion
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self._check_operand(other)
        return self._coeffs == other._coeffs

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self._check_operand(other)
        return self._coeffs != other._coeffs

    __hash__ = None  # type: ignore[assignment]

    def almost_equal(
        self,
        other: Quaternion,
        atol: Optional[float] = None,
        params: Optional[ToleranceParams] = None,
    ) -> bool:
        """Check componentwise approximate equality.

        Tolerances resolve the same way as FixedVector.almost_equal().
        """
        self._check_operand(other)
        return self._coeffs.almost_equal(other._coeffs, atol, params)

    def copy(self) -> Quaternion:
        """Return an independent copy."""
        return type(self)(self)

    def __copy__(self) -> Quaternion:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Quaternion:
        return self.copy()

    def __reduce__(self) -> Tuple[Any, ...]:
        return (_rebuild_quaternion, (self.DTYPE.str, self._coeffs.tolist()))

    def __str__(self) -> str:
        return text_format.render(self._coeffs)

    def __repr__(self) -> str:
        x, y, z, w = self._coeffs.tolist()
        return f"{type(self).__name__}(x={x!r}, y={y!r}, z={z!r}, w={w!r})"


def quaternion_type(dtype: DTypeLike) -> type:
    """Return the quaternion class for a floating scalar type."""
    resolved: np.dtype = resolve_dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise ScalarTypeError(
            f"Quaternion scalar type must be floating point, got {resolved.name}"
        )
    return _specialize(resolved)


@functools.lru_cache(maxsize=None)
def _specialize(dtype: np.dtype) -> type:
    if dtype == Quaternion.DTYPE:
        return Quaternion
    name: str = f"Quaternion_{dtype.name}"
    if dtype == np.dtype(np.float32):
        name = "Quaternionf"
    namespace: dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "DTYPE": dtype,
    }
    return type(name, (Quaternion,), namespace)


def _rebuild_quaternion(dtype: str, coeffs: List[Any]) -> Quaternion:
    return quaternion_type(dtype).from_coeffs(coeffs)


Quaterniond: type = Quaternion
Quaternionf: type = quaternion_type(np.float32)
