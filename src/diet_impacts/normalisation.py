"""
Normalisation of summary records for display

Charts stack the indicators on top of each other.
To keep the stacks readable, each indicator is first scaled
by its maximum across the buckets being shown
and then multiplied by a fixed weight.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd
import pandas_indexing as pix

from diet_impacts.aggregation import GroupKind
from diet_impacts.constants import (
    ALL_LABEL,
    CATEGORY_DIMENSIONS,
    DEFAULT_NORMALISATION_WEIGHTS,
    INDICATORS,
)
from diet_impacts.exceptions import UnrecognisedValueError
from diet_impacts.typing import SummaryDataFrame


def select_buckets(summary: SummaryDataFrame, kind: GroupKind) -> SummaryDataFrame:
    """
    Select the buckets of a given kind of grouping

    Parameters
    ----------
    summary
        Summary records

    kind
        Kind of grouping to select

    Returns
    -------
    :
        The rows of `summary` which belong to `kind`'s buckets.
        In other words, the rows which are `"All"`
        in every dimension `kind` doesn't split by
        and are not `"All"` in the dimensions it does split by.
    """
    placeholder_dimensions = [
        d for d in CATEGORY_DIMENSIONS if d not in kind.dimensions
    ]
    res = summary.loc[
        pix.isin(**{dimension: [ALL_LABEL] for dimension in placeholder_dimensions})
    ]

    for dimension in kind.dimensions:
        res = res.loc[res.index.get_level_values(dimension) != ALL_LABEL]

    return res


def get_indicator_maxima(subset: SummaryDataFrame) -> pd.Series[float]:  # type: ignore # pandas-stubs not up to date
    """
    Get the maximum of each indicator

    Parameters
    ----------
    subset
        Summary records over which to take the maximum

    Returns
    -------
    :
        Maximum of each indicator across `subset`.
        If `subset` is empty, the maxima are zero.
    """
    return subset[list(INDICATORS)].max().fillna(0.0)


def get_normalisation_weights(
    weights: Mapping[str, float] | None = None,
) -> pd.Series[float]:  # type: ignore # pandas-stubs not up to date
    """
    Get the weight to apply to each indicator

    Parameters
    ----------
    weights
        Weights to use.

        Indicators which aren't in `weights` use the weight from
        [DEFAULT_NORMALISATION_WEIGHTS][diet_impacts.constants.DEFAULT_NORMALISATION_WEIGHTS].

    Returns
    -------
    :
        Weight for each indicator

    Raises
    ------
    UnrecognisedValueError
        `weights` contains a key which isn't an indicator
    """
    if weights is None:
        weights = {}

    for indicator in weights:
        if indicator not in INDICATORS:
            raise UnrecognisedValueError(
                unrecognised_value=indicator,
                name="indicator",
                known_values=INDICATORS,
            )

    weights_full = {**DEFAULT_NORMALISATION_WEIGHTS, **weights}

    return pd.Series(
        [float(weights_full[indicator]) for indicator in INDICATORS],
        index=list(INDICATORS),
    )


def normalise_indicators(
    subset: SummaryDataFrame,
    weights: Mapping[str, float] | None = None,
) -> SummaryDataFrame:
    """
    Normalise each indicator by its maximum and apply the indicator's weight

    The result for indicator `i` in bucket `j` is
    `(raw[i, j] / max[i]) * weight[i]`,
    where `max[i]` is the maximum of `i` across `subset`.
    If `max[i]` is zero, the result is zero.

    Parameters
    ----------
    subset
        Summary records to normalise (e.g. the output of [select_buckets][(m).])

    weights
        Weights to use, see [get_normalisation_weights][(m).]

    Returns
    -------
    :
        Normalised values, with the same index as `subset`

    Examples
    --------
    >>> subset = pd.DataFrame(
    ...     [[2.0, 0.0, 1.0, 1.0, 1.0, 1.0], [4.0, 0.0, 1.0, 1.0, 1.0, 1.0]],
    ...     columns=list(INDICATORS),
    ...     index=pd.Index(["vegan", "high_meat"], name="dietGroup"),
    ... )
    >>> normalise_indicators(subset)[["ghgs", "landUse"]]  # doctest: +NORMALIZE_WHITESPACE
               ghgs  landUse
    dietGroup
    vegan       0.5      0.0
    high_meat   1.0      0.0
    """
    maxima = get_indicator_maxima(subset).to_numpy(dtype=float)
    weights_s = get_normalisation_weights(weights)

    raw = subset[list(INDICATORS)].to_numpy(dtype=float)
    ratio = np.divide(
        raw,
        maxima,
        out=np.zeros_like(raw),
        where=maxima != 0.0,
    )

    return pd.DataFrame(
        ratio * weights_s.to_numpy(),
        index=subset.index,
        columns=list(INDICATORS),
    )
