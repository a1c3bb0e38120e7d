"""
Coercion of raw indicator values to numbers
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pandas as pd


def coerce_numeric(value: Any) -> tuple[float, bool]:
    """
    Coerce a raw value to a float

    Numbers are used as they are.
    Strings are trimmed, have `","` replaced with `"."`
    (some revisions of the data use a decimal comma)
    and are then parsed.
    Anything else, or anything that can't be parsed, gives zero.

    Parameters
    ----------
    value
        Value to coerce

    Returns
    -------
    :
        The coerced value and whether `value` was actually reported
        (i.e. non-empty and parseable).
        Values which weren't reported should not count
        towards the number of samples when averaging.

    Examples
    --------
    >>> coerce_numeric("2,5")
    (2.5, True)
    >>> coerce_numeric(" 3 ")
    (3.0, True)
    >>> coerce_numeric("")
    (0.0, False)
    >>> coerce_numeric(None)
    (0.0, False)
    >>> coerce_numeric("n/a")
    (0.0, False)
    """
    if isinstance(value, (bool, np.bool_)):
        return 0.0, False

    if isinstance(value, (int, float, np.integer, np.floating)):
        res = float(value)

    elif isinstance(value, str):
        value_clean = value.strip().replace(",", ".")
        if not value_clean:
            return 0.0, False

        try:
            res = float(value_clean)
        except ValueError:
            return 0.0, False

    else:
        return 0.0, False

    if not math.isfinite(res):
        return 0.0, False

    return res, True


def coerce_numeric_series(values: pd.Series[Any]) -> pd.Series[float]:  # type: ignore # pandas-stubs not up to date
    """
    Coerce a series of raw values to floats

    Parameters
    ----------
    values
        Values to coerce

    Returns
    -------
    :
        Coerced values. Values which weren't reported
        (see [coerce_numeric][(m).]) are `NaN`.
    """
    res = values.map(_coerce_numeric_or_nan)

    return res.astype(float)


def _coerce_numeric_or_nan(value: Any) -> float:
    coerced, reported = coerce_numeric(value)
    if not reported:
        return np.nan

    return coerced
