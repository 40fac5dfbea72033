################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the vector and quaternion utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

import numpy as np


# Componentwise equality tolerance, double-precision machine epsilon
EQUALITY_EPS: float = float(np.finfo(np.float64).eps)
# Norm below which normalization and inversion are rejected
DEGENERATE_NORM_EPS: float = 1e-12

# Separator between rendered components
FORMAT_SEPARATOR: str = " "
# Decimal digits used by fixed-notation rendering
FORMAT_FIXED_DECIMALS: int = 6
# Significant digits used by native rendering
FORMAT_GENERAL_DIGITS: int = 6


class MathlibParamsError(Exception):
    """Raised when math utility parameter validation fails."""


def _require_positive_finite(value: float, name: str) -> None:
    """Require a positive, finite value."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise MathlibParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise MathlibParamsError(f"{name} must be finite")
    if value <= 0.0:
        raise MathlibParamsError(f"{name} must be positive")


def _require_non_negative_int(value: int, name: str) -> None:
    """Require a non-negative integer value."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise MathlibParamsError(f"{name} must be an int")
    if value < 0:
        raise MathlibParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Numerical tolerances for comparisons and degenerate inputs."""

    # Componentwise equality tolerance
    equality_eps: float = EQUALITY_EPS
    # Norm below which normalization and inversion are rejected
    degenerate_norm_eps: float = DEGENERATE_NORM_EPS


@dataclass(frozen=True)
class FormatParams:
    """Text rendering parameters."""

    # Separator between rendered components
    separator: str = FORMAT_SEPARATOR
    # Decimal digits for fixed-notation rendering
    fixed_decimals: int = FORMAT_FIXED_DECIMALS
    # Significant digits for native rendering
    general_digits: int = FORMAT_GENERAL_DIGITS


@dataclass(frozen=True)
class MathlibParams:
    """Complete configuration tree for the math utilities."""

    tolerance: ToleranceParams
    format: FormatParams

    @classmethod
    def defaults(cls) -> MathlibParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            format=FormatParams(),
        )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> MathlibParams:
        """Build a validated parameter tree from a nested mapping.

        Missing namespaces and keys keep their defaults. Unknown namespaces
        or keys are rejected so typos do not pass silently.
        """
        namespaces: dict[str, type] = {
            "tolerance": ToleranceParams,
            "format": FormatParams,
        }
        unknown: set[str] = set(values) - set(namespaces)
        if unknown:
            raise MathlibParamsError(f"Unknown namespaces: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, params_cls in namespaces.items():
            overrides: Mapping[str, Any] = values.get(name) or {}
            allowed: set[str] = {field.name for field in fields(params_cls)}
            unknown_keys: set[str] = set(overrides) - allowed
            if unknown_keys:
                raise MathlibParamsError(
                    f"Unknown keys in {name}: {sorted(unknown_keys)}"
                )
            kwargs[name] = params_cls(**overrides)

        params: MathlibParams = cls(**kwargs)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive_finite(
            self.tolerance.equality_eps, "tolerance.equality_eps"
        )
        _require_positive_finite(
            self.tolerance.degenerate_norm_eps, "tolerance.degenerate_norm_eps"
        )

        if not isinstance(self.format.separator, str) or not self.format.separator:
            raise MathlibParamsError("format.separator must be a non-empty string")
        if not self.format.separator.isspace():
            # Parsing splits on whitespace, so rendered text must round trip
            raise MathlibParamsError("format.separator must be whitespace")
        _require_non_negative_int(self.format.fixed_decimals, "format.fixed_decimals")
        _require_non_negative_int(self.format.general_digits, "format.general_digits")
        if self.format.general_digits == 0:
            raise MathlibParamsError("format.general_digits must be positive")

    def replace(self, **namespace_overrides: Any) -> MathlibParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
