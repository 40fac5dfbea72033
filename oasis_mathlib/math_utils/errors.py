################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Exceptions raised by the vector and quaternion math utilities."""

from __future__ import annotations


class ContractViolationError(Exception):
    """Raised when a caller violates a vector or quaternion contract."""


class DimensionMismatchError(ContractViolationError, TypeError):
    """Raised when vector sizes or slice bounds are incompatible."""


class ScalarTypeError(ContractViolationError, TypeError):
    """Raised when a scalar type is unsupported or does not match."""


class LengthMismatchError(ContractViolationError, ValueError):
    """Raised when a sequence has the wrong number of elements."""


class ComponentRangeError(ContractViolationError, IndexError):
    """Raised when a checked component access is out of range."""


class DegenerateInputError(ContractViolationError, ValueError):
    """Raised when an operation requires a non-zero norm."""


class TextFormatError(ContractViolationError, ValueError):
    """Raised when text cannot be parsed into vector components."""
