################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Text rendering and parsing for fixed-size vectors.

Two renderings are provided:
    - render(): native rendering, components in index order separated by a
      single space with no trailing separator. Floating components use
      C-stream default formatting (6 significant digits, %g), so
      [1.0, 2.0, 3.0] renders as "1 2 3".
    - to_string(): fixed notation with 6 decimals, so [1.0, 2.0, 3.0]
      renders as "1.000000 2.000000 3.000000".

Integer components always render as plain integers. parse() mirrors
render(): exactly N whitespace-separated scalars assigned in order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Iterable
from typing import List
from typing import Optional

import numpy as np

from ..config.mathlib_params import FormatParams
from .errors import LengthMismatchError
from .errors import TextFormatError


if TYPE_CHECKING:
    from .fixed_vector import FixedVector


_LOG: logging.Logger = logging.getLogger(__name__)


def render(values: Iterable[Any], params: Optional[FormatParams] = None) -> str:
    """Return the native space-separated rendering."""
    fmt: FormatParams = params if params is not None else FormatParams()
    return fmt.separator.join(
        _format_general(value, fmt.general_digits) for value in values
    )


def to_string(values: Iterable[Any], params: Optional[FormatParams] = None) -> str:
    """Return the fixed-notation rendering."""
    fmt: FormatParams = params if params is not None else FormatParams()
    return fmt.separator.join(
        _format_fixed(value, fmt.fixed_decimals) for value in values
    )


def parse(text: str, vector_cls: type) -> FixedVector:
    """Parse exactly SIZE whitespace-separated scalars into a new vector."""
    tokens: List[str] = text.split()
    if len(tokens) != vector_cls.SIZE:
        raise LengthMismatchError(
            f"{vector_cls.__name__} requires {vector_cls.SIZE} values, "
            f"got {len(tokens)}"
        )
    values: List[Any] = [_parse_token(token, vector_cls.DTYPE) for token in tokens]
    return vector_cls(values)


def _format_general(value: Any, digits: int) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):.{digits}g}"


def _format_fixed(value: Any, decimals: int) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):.{decimals}f}"


def _parse_token(token: str, dtype: np.dtype) -> Any:
    try:
        if np.issubdtype(dtype, np.integer):
            return int(token)
        return float(token)
    except ValueError as exc:
        _LOG.debug("Failed to parse %r as %s", token, dtype.name)
        raise TextFormatError(f"Cannot parse {token!r} as {dtype.name}") from exc
