################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the math utility parameter schema."""

from __future__ import annotations

import dataclasses
import math

import pytest

from oasis_mathlib.config.mathlib_params import DEGENERATE_NORM_EPS
from oasis_mathlib.config.mathlib_params import EQUALITY_EPS
from oasis_mathlib.config.mathlib_params import FormatParams
from oasis_mathlib.config.mathlib_params import MathlibParams
from oasis_mathlib.config.mathlib_params import MathlibParamsError
from oasis_mathlib.config.mathlib_params import ToleranceParams


def test_defaults_validate() -> None:
    """Ensure the default parameter tree is valid."""
    params: MathlibParams = MathlibParams.defaults()
    params.validate()

    assert params.tolerance.equality_eps == EQUALITY_EPS
    assert params.tolerance.degenerate_norm_eps == DEGENERATE_NORM_EPS
    assert params.format.separator == " "
    assert params.format.fixed_decimals == 6
    assert params.format.general_digits == 6


def test_equality_eps_is_double_epsilon() -> None:
    """Ensure the equality tolerance is double-precision machine epsilon."""
    assert EQUALITY_EPS == 2.220446049250313e-16
    assert 1.0 + EQUALITY_EPS != 1.0
    assert 1.0 + EQUALITY_EPS / 2 == 1.0


def test_from_dict_overrides() -> None:
    """Ensure nested overrides are applied and missing keys keep defaults."""
    params: MathlibParams = MathlibParams.from_dict(
        {
            "tolerance": {"degenerate_norm_eps": 1e-9},
            "format": {"separator": "\t"},
        }
    )

    assert params.tolerance.degenerate_norm_eps == 1e-9
    assert params.tolerance.equality_eps == EQUALITY_EPS
    assert params.format.separator == "\t"
    assert params.format.fixed_decimals == 6


def test_from_dict_empty() -> None:
    """Ensure an empty mapping yields the defaults."""
    assert MathlibParams.from_dict({}) == MathlibParams.defaults()


def test_from_dict_rejects_unknown_namespace() -> None:
    """Ensure unknown namespaces are rejected."""
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"tolerances": {}})


def test_from_dict_rejects_unknown_key() -> None:
    """Ensure unknown keys are rejected."""
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"format": {"decimals": 3}})


@pytest.mark.parametrize("value", [0.0, -1e-12, math.inf, math.nan, "1e-9", True])
def test_invalid_tolerance(value: object) -> None:
    """Ensure tolerances must be positive finite numbers."""
    params: MathlibParams = MathlibParams(
        tolerance=ToleranceParams(equality_eps=value),  # type: ignore[arg-type]
        format=FormatParams(),
    )
    with pytest.raises(MathlibParamsError):
        params.validate()


@pytest.mark.parametrize("separator", ["", ",", " , "])
def test_invalid_separator(separator: str) -> None:
    """Ensure the separator is non-empty whitespace."""
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"format": {"separator": separator}})


def test_invalid_digits() -> None:
    """Ensure digit counts are validated."""
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"format": {"fixed_decimals": -1}})
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"format": {"fixed_decimals": 2.0}})
    with pytest.raises(MathlibParamsError):
        MathlibParams.from_dict({"format": {"general_digits": 0}})

    params: MathlibParams = MathlibParams.from_dict({"format": {"fixed_decimals": 0}})
    assert params.format.fixed_decimals == 0


def test_replace() -> None:
    """Ensure replace returns a modified copy."""
    params: MathlibParams = MathlibParams.defaults()
    updated: MathlibParams = params.replace(format=FormatParams(fixed_decimals=3))

    assert updated.format.fixed_decimals == 3
    assert params.format.fixed_decimals == 6
    assert updated.tolerance is params.tolerance


def test_params_are_frozen() -> None:
    """Ensure parameter objects are immutable."""
    params: MathlibParams = MathlibParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.format.separator = ","  # type: ignore[misc]


def test_as_nested_dict() -> None:
    """Ensure the nested dict mirrors the parameter tree."""
    nested: dict = MathlibParams.defaults().as_nested_dict()

    assert nested == {
        "tolerance": {
            "equality_eps": EQUALITY_EPS,
            "degenerate_norm_eps": DEGENERATE_NORM_EPS,
        },
        "format": {
            "separator": " ",
            "fixed_decimals": 6,
            "general_digits": 6,
        },
    }
