################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-dimension numeric vectors backed by numpy storage."""

from __future__ import annotations

import functools
import logging
import numbers
import operator
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from ..config.mathlib_params import FormatParams
from ..config.mathlib_params import ToleranceParams
from . import text_format
from .errors import ComponentRangeError
from .errors import DegenerateInputError
from .errors import DimensionMismatchError
from .errors import LengthMismatchError
from .errors import ScalarTypeError


_LOG: logging.Logger = logging.getLogger(__name__)

# Named accessors, in index order
COMPONENT_NAMES: Tuple[str, ...] = ("x", "y", "z")

# Class name suffixes for the common scalar types, e.g. Vector3d
_DTYPE_SUFFIXES: dict[np.dtype, str] = {
    np.dtype(np.float64): "d",
    np.dtype(np.float32): "f",
    np.dtype(np.int32): "i",
    np.dtype(np.uint32): "u",
}


class FixedVector:
    """Vector holding exactly ``SIZE`` scalars of numpy dtype ``DTYPE``.

    Responsibility:
        Provide a small value type for fixed-size vectors with elementwise
        arithmetic, reductions, norms, slicing and checked access.

    Specialization:
        The size and scalar type are bound per class. ``FixedVector[3,
        np.float64]`` (or ``vector_type(3, np.float64)``) returns the cached
        class for that pair, so two vectors share a class exactly when they
        share size and scalar type. The unspecialized base cannot be
        instantiated.

        Operations that only make sense for some specializations are only
        present on those classes:
            - x, y, z exist when SIZE is at least 1, 2, 3
            - cross() exists when SIZE is 3
            - norm(), normalize(), normalized() and division exist when
              DTYPE is floating point

    Construction:
        V()             zero vector
        V(s)            every component set to scalar s
        V(seq)          exactly SIZE values from a sequence
        V(a, b, ...)    exactly SIZE positional scalars
        V(other)        copy of a vector of the same class

    Arithmetic:
        The compound operators mutate in place and are the only arithmetic
        kernels. The binary operators copy the left operand and apply the
        compound operator to the copy. Results are stored in DTYPE, so
        integer vectors truncate.

    Equality:
        Two vectors compare equal when every component pair differs by at
        most EQUALITY_EPS (double-precision machine epsilon). NaN components
        never compare equal.

    Binary operations between vectors of different classes raise
    DimensionMismatchError for different sizes and ScalarTypeError for
    different scalar types.
    """

    __slots__ = ("_data",)

    # Numpy binary operators defer to the reflected methods below
    __array_ufunc__ = None

    SIZE: ClassVar[int]
    DTYPE: ClassVar[np.dtype]

    _data: NDArray[Any]

    def __class_getitem__(cls, params: Tuple[int, DTypeLike]) -> type:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("FixedVector[...] expects a (size, dtype) pair")
        return vector_type(params[0], params[1])

    def __init__(self, *values: Any) -> None:
        cls: type = type(self)
        if not hasattr(cls, "SIZE"):
            raise TypeError("FixedVector must be specialized, use FixedVector[N, dtype]")

        self._data = np.zeros(cls.SIZE, dtype=cls.DTYPE)
        if not values:
            return

        if len(values) == 1:
            value: Any = values[0]
            if isinstance(value, FixedVector):
                self._check_operand(value)
                self._data[:] = value._data
            elif _is_scalar(value):
                self._data[:] = value
            else:
                self._assign_sequence(value)
            return

        self._assign_sequence(values)

    @classmethod
    def size(cls) -> int:
        """Return the number of components."""
        return cls.SIZE

    @classmethod
    def from_string(cls, text: str) -> FixedVector:
        """Parse whitespace-separated components."""
        return text_format.parse(text, cls)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> FixedVector:
        """Adopt an array of the right shape and dtype without copying."""
        vector: FixedVector = cls.__new__(cls)
        vector._data = data
        return vector

    def _assign_sequence(self, values: Any) -> None:
        array: NDArray[Any] = np.asarray(list(values))
        if array.shape != (self.SIZE,):
            raise LengthMismatchError(
                f"{type(self).__name__} requires {self.SIZE} values, "
                f"got {array.shape[0] if array.ndim else 0}"
            )
        self._data[:] = array

    def _check_operand(self, other: FixedVector) -> None:
        if other.SIZE != self.SIZE:
            raise DimensionMismatchError(
                f"Vector sizes differ: {self.SIZE} and {other.SIZE}"
            )
        if other.DTYPE != self.DTYPE:
            raise ScalarTypeError(
                f"Vector scalar types differ: {self.DTYPE.name} and "
                f"{other.DTYPE.name}"
            )

    def _operand(self, other: Any) -> Optional[NDArray[Any]]:
        if isinstance(other, FixedVector):
            self._check_operand(other)
            return other._data
        if _is_scalar(other):
            return np.asarray(other)
        return None

    def _apply_in_place(self, ufunc: np.ufunc, other: Any) -> bool:
        operand: Optional[NDArray[Any]] = self._operand(other)
        if operand is None:
            return False
        ufunc(self._data, operand, out=self._data, casting="unsafe")
        return True

    def copy(self) -> FixedVector:
        """Return an independent copy."""
        return self._wrap(self._data.copy())

    def __copy__(self) -> FixedVector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> FixedVector:
        return self.copy()

    def __reduce__(self) -> Tuple[Any, ...]:
        return (_rebuild_vector, (self.SIZE, self.DTYPE.str, self.tolist()))

    #
    # Arithmetic
    #

    def __iadd__(self, other: Any) -> FixedVector:
        if not self._apply_in_place(np.add, other):
            return NotImplemented
        return self

    def __isub__(self, other: Any) -> FixedVector:
        if not self._apply_in_place(np.subtract, other):
            return NotImplemented
        return self

    def __imul__(self, other: Any) -> FixedVector:
        if not self._apply_in_place(np.multiply, other):
            return NotImplemented
        return self

    def __add__(self, other: Any) -> FixedVector:
        result: FixedVector = self.copy()
        if not result._apply_in_place(np.add, other):
            return NotImplemented
        return result

    def __sub__(self, other: Any) -> FixedVector:
        result: FixedVector = self.copy()
        if not result._apply_in_place(np.subtract, other):
            return NotImplemented
        return result

    def __mul__(self, other: Any) -> FixedVector:
        result: FixedVector = self.copy()
        if not result._apply_in_place(np.multiply, other):
            return NotImplemented
        return result

    def __radd__(self, other: Any) -> FixedVector:
        if not _is_scalar(other):
            return NotImplemented
        return self + other

    def __rmul__(self, other: Any) -> FixedVector:
        if not _is_scalar(other):
            return NotImplemented
        return self * other

    def __neg__(self) -> FixedVector:
        return self * -1

    #
    # Reductions
    #

    def sum(self) -> Any:
        """Return the sum of all components, 0 for an empty vector."""
        return self._data.sum(dtype=self.DTYPE)

    def min(self) -> Any:
        """Return the smallest component."""
        self._require_components("min")
        return self._data.min()

    def max(self) -> Any:
        """Return the largest component."""
        self._require_components("max")
        return self._data.max()

    def min_coeff(self) -> ComponentRef:
        """Return a handle to the first smallest component."""
        self._require_components("min_coeff")
        return ComponentRef(self, int(np.argmin(self._data)))

    def max_coeff(self) -> ComponentRef:
        """Return a handle to the first largest component."""
        self._require_components("max_coeff")
        return ComponentRef(self, int(np.argmax(self._data)))

    def dot(self, other: FixedVector) -> Any:
        """Return the dot product with a vector of the same class."""
        self._check_operand(other)
        return (self._data * other._data).sum(dtype=self.DTYPE)

    def squared_norm(self) -> Any:
        """Return the squared euclidean norm."""
        return self.dot(self)

    def _require_components(self, name: str) -> None:
        if self.SIZE == 0:
            raise ComponentRangeError(f"{name}() requires at least one component")

    #
    # Access
    #

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        # Unchecked in the contract, the caller guarantees 0 <= index < SIZE
        return self._data[operator.index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[operator.index(index)] = value

    def __call__(self, index: int) -> Any:
        return self[index]

    def at(self, index: int) -> Any:
        """Return the component at index, raising if it is out of range."""
        return self._data[self._checked_index(index)]

    def set_at(self, index: int, value: Any) -> None:
        """Write the component at index, raising if it is out of range."""
        self._data[self._checked_index(index)] = value

    def _checked_index(self, index: int) -> int:
        idx: int = operator.index(index)
        if not 0 <= idx < self.SIZE:
            raise ComponentRangeError(
                f"Index {idx} out of range for {type(self).__name__}"
            )
        return idx

    def loader(self) -> ComponentLoader:
        """Return a loader that writes components in order from index 0."""
        return ComponentLoader(self)

    #
    # Slicing
    #

    def head(self, count: int) -> FixedVector:
        """Return a copy of the first count components."""
        return self._slice(_slice_bounds(self.SIZE, 0, operator.index(count)))

    def tail(self, count: int) -> FixedVector:
        """Return a copy of the last count components."""
        n: int = operator.index(count)
        return self._slice(_slice_bounds(self.SIZE, self.SIZE - n, n))

    def segment(self, start: int, count: int) -> FixedVector:
        """Return a copy of count components beginning at start."""
        return self._slice(
            _slice_bounds(self.SIZE, operator.index(start), operator.index(count))
        )

    def _slice(self, bounds: slice) -> FixedVector:
        count: int = bounds.stop - bounds.start
        return vector_type(count, self.DTYPE)._wrap(self._data[bounds].copy())

    #
    # Comparison and conversion
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self.almost_equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return not self.almost_equal(other)

    __hash__ = None  # type: ignore[assignment]

    def almost_equal(
        self,
        other: FixedVector,
        atol: Optional[float] = None,
        params: Optional[ToleranceParams] = None,
    ) -> bool:
        """Check that every component pair differs by at most atol.

        Without an explicit atol the tolerance is params.equality_eps, which
        defaults to double-precision machine epsilon. With both defaults
        this is the == comparison.
        """
        self._check_operand(other)
        if atol is None:
            atol = _tolerance(params).equality_eps
        diff: NDArray[np.float64] = np.abs(
            self._data.astype(np.float64) - other._data.astype(np.float64)
        )
        return bool(np.all(diff <= atol))

    def cast(self, dtype: DTypeLike) -> FixedVector:
        """Return a copy converted to another scalar type.

        Conversion follows numpy casting rules, so floating values are
        truncated toward zero when cast to an integer type.
        """
        target: type = vector_type(self.SIZE, dtype)
        return target._wrap(self._data.astype(target.DTYPE))

    def tolist(self) -> List[Any]:
        """Return the components as Python scalars."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Return a copy of the components as a numpy array."""
        return self._data.copy()

    def to_string(self, params: Optional[FormatParams] = None) -> str:
        """Return the fixed-notation rendering of the components."""
        return text_format.to_string(self, params)

    def __str__(self) -> str:
        return text_format.render(self)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.tolist())
        return f"{type(self).__name__}({values})"


class FloatingPointMixin:
    """Operations only available when the scalar type is floating point."""

    __slots__ = ()

    def __itruediv__(self, other: Any) -> FixedVector:
        if not self._apply_in_place(np.divide, other):  # type: ignore[attr-defined]
            return NotImplemented
        return self  # type: ignore[return-value]

    def __truediv__(self, other: Any) -> FixedVector:
        result: FixedVector = self.copy()  # type: ignore[attr-defined]
        if not result._apply_in_place(np.divide, other):
            return NotImplemented
        return result

    def norm(self) -> Any:
        """Return the euclidean norm."""
        return np.sqrt(self.squared_norm())  # type: ignore[attr-defined]

    def normalize(self, params: Optional[ToleranceParams] = None) -> None:
        """Scale this vector in place to unit norm.

        Raises DegenerateInputError when the norm is below
        params.degenerate_norm_eps.
        """
        norm: Any = self.norm()
        if norm < _tolerance(params).degenerate_norm_eps:
            _LOG.debug("Rejecting normalization of %r, norm %s", self, norm)
            raise DegenerateInputError(
                f"Cannot normalize {type(self).__name__} with norm {norm}"
            )
        np.divide(self._data, norm, out=self._data)  # type: ignore[attr-defined]

    def normalized(self, params: Optional[ToleranceParams] = None) -> FixedVector:
        """Return a unit-norm copy, leaving this vector unchanged."""
        result: FixedVector = self.copy()  # type: ignore[attr-defined]
        result.normalize(params)  # type: ignore[attr-defined]
        return result


class CrossProductMixin:
    """Operations only available on 3-vectors."""

    __slots__ = ()

    def cross(self, other: FixedVector) -> FixedVector:
        """Return the right-handed cross product with another 3-vector."""
        self._check_operand(other)  # type: ignore[attr-defined]
        a: NDArray[Any] = self._data  # type: ignore[attr-defined]
        b: NDArray[Any] = other._data
        result: NDArray[Any] = np.array(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ],
            dtype=a.dtype,
        )
        return self._wrap(result)  # type: ignore[attr-defined]


class ComponentRef:
    """Read/write handle to one component of a vector."""

    __slots__ = ("_vector", "_index")

    def __init__(self, vector: FixedVector, index: int) -> None:
        self._vector: FixedVector = vector
        self._index: int = vector._checked_index(index)

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> Any:
        return self._vector[self._index]

    @value.setter
    def value(self, value: Any) -> None:
        self._vector[self._index] = value

    def __repr__(self) -> str:
        return f"ComponentRef(index={self._index}, value={self.value!r})"


class ComponentLoader:
    """Writes components into a vector one at a time.

    The cursor starts at index 0 and advances with every push(). Pushing
    more values than the vector holds raises ComponentRangeError; values
    already pushed stay written.
    """

    __slots__ = ("_vector", "_cursor")

    def __init__(self, vector: FixedVector) -> None:
        self._vector: FixedVector = vector
        self._cursor: int = 0

    @property
    def cursor(self) -> int:
        """Index the next pushed value is written to."""
        return self._cursor

    def push(self, value: Any) -> ComponentLoader:
        """Write the next component and return the loader for chaining."""
        if self._cursor >= self._vector.SIZE:
            raise ComponentRangeError(
                f"{type(self._vector).__name__} holds {self._vector.SIZE} values, "
                "loader is full"
            )
        self._vector[self._cursor] = value
        self._cursor += 1
        return self


def vector_type(size: int, dtype: DTypeLike) -> type:
    """Return the vector class for a size and scalar type."""
    try:
        n: int = operator.index(size)
    except TypeError as exc:
        raise DimensionMismatchError(f"Vector size must be an int, got {size!r}") from exc
    if n < 0:
        raise DimensionMismatchError(f"Vector size must be non-negative, got {n}")
    return _specialize(n, resolve_dtype(dtype))


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """Return the numpy dtype for a supported integer or floating type."""
    try:
        resolved: np.dtype = np.dtype(dtype)
    except TypeError as exc:
        raise ScalarTypeError(f"Unsupported scalar type: {dtype!r}") from exc
    if not (
        np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)
    ):
        raise ScalarTypeError(f"Scalar type must be numeric, got {resolved.name}")
    return resolved


@functools.lru_cache(maxsize=None)
def _specialize(size: int, dtype: np.dtype) -> type:
    bases: List[type] = []
    if size == 3:
        bases.append(CrossProductMixin)
    if np.issubdtype(dtype, np.floating):
        bases.append(FloatingPointMixin)
    bases.append(FixedVector)

    suffix: Optional[str] = _DTYPE_SUFFIXES.get(dtype)
    name: str = f"Vector{size}{suffix}" if suffix else f"Vector{size}_{dtype.name}"

    namespace: dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "SIZE": size,
        "DTYPE": dtype,
    }
    for index, component in enumerate(COMPONENT_NAMES[:size]):
        namespace[component] = _component_property(index, component)

    return type(name, tuple(bases), namespace)


@functools.lru_cache(maxsize=None)
def _slice_bounds(size: int, start: int, count: int) -> slice:
    # Resolved once per shape, the runtime stand-in for a static bound check
    if not 0 <= count <= size:
        raise DimensionMismatchError(
            f"Slice length {count} exceeds vector size {size}"
        )
    if start < 0 or start + count > size:
        raise DimensionMismatchError(
            f"Slice [{start}, {start + count}) exceeds vector size {size}"
        )
    return slice(start, start + count)


def _tolerance(params: Optional[ToleranceParams]) -> ToleranceParams:
    return params if params is not None else ToleranceParams()


def _component_property(index: int, name: str) -> property:
    def getter(self: FixedVector) -> Any:
        return self._data[index]

    def setter(self: FixedVector, value: Any) -> None:
        self._data[index] = value

    return property(getter, setter, doc=f"Component {index} ({name}).")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _rebuild_vector(size: int, dtype: str, values: List[Any]) -> FixedVector:
    return vector_type(size, dtype)(values)
