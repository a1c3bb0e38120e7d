"""
Conversion of raw records into canonical records
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd
from attrs import define, field
from loguru import logger

from diet_impacts.coercion import coerce_numeric_series
from diet_impacts.constants import (
    AGE_GROUP,
    CATEGORY_DIMENSIONS,
    DIET_GROUP,
    FIELD_ATTRIBUTE_NAMES,
    GENDER,
    INDICATORS,
)
from diet_impacts.renaming import clean_label, convert_code, reconcile_columns
from diet_impacts.typing import CanonicalDataFrame, RawDataFrame, RawRecord


@define(frozen=True)
class CanonicalRecord:
    """
    A single respondent record, in our conventions
    """

    diet_group: str
    """
    Diet group label. Never empty.
    """

    gender: str
    """
    Gender label
    """

    age_group: str
    """
    Age group label
    """

    ghgs: float = 0.0
    """
    Greenhouse-gas emissions
    """

    land_use: float = 0.0
    """
    Land use
    """

    water_scarcity: float = 0.0
    """
    Water scarcity
    """

    eutrophication: float = 0.0
    """
    Eutrophication
    """

    acidification: float = 0.0
    """
    Acidification
    """

    biodiversity: float = 0.0
    """
    Biodiversity impact
    """

    reported_indicators: frozenset[str] = field(factory=frozenset, converter=frozenset)
    """
    Indicators which were actually reported for this record

    Indicators not in here were missing or unparseable in the input.
    Their value above is zero, but they do not count as samples
    when averaging.
    """

    def get(self, field_name: str) -> Any:
        """
        Get the value of a field using its canonical name (e.g. `"landUse"`)
        """
        return getattr(self, FIELD_ATTRIBUTE_NAMES[field_name])


def raw_records_to_frame(raw_records: Iterable[RawRecord]) -> RawDataFrame:
    """
    Convert a collection of raw records into a [pd.DataFrame][pandas.DataFrame]

    Parameters
    ----------
    raw_records
        Raw records

    Returns
    -------
    :
        Raw records as a frame.
        Columns appear in the order they are first seen.
    """
    return pd.DataFrame.from_records(list(raw_records))


def canonicalise(
    raw: RawDataFrame,
    column_map: Mapping[str, str] | None = None,
    aliases: pd.DataFrame | None = None,
    survey_codes: pd.DataFrame | None = None,
) -> CanonicalDataFrame:
    """
    Convert raw records into canonical form

    Parameters
    ----------
    raw
        Raw records

    column_map
        Map from canonical field to the column in `raw` to use for it.

        If not supplied, this is derived from `raw`'s columns
        with [reconcile_columns][diet_impacts.renaming.reconcile_columns].

    aliases
        Column aliases to use when deriving `column_map`

    survey_codes
        Survey codes database to use when converting category codes

    Returns
    -------
    :
        Canonical records.
        Records without a diet group are dropped.
        Indicator values which weren't reported are `NaN`.
    """
    if column_map is None:
        column_map = reconcile_columns(raw.columns, aliases=aliases)

    def get_raw_column(canonical_field: str) -> pd.Series[Any]:  # type: ignore # pandas-stubs not up to date
        if canonical_field in column_map:
            return raw[column_map[canonical_field]]

        return pd.Series(np.nan, index=raw.index, dtype=object)

    diet_groups_clean = get_raw_column(DIET_GROUP).map(clean_label)
    keep = (diet_groups_clean != "").to_numpy()
    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.debug("Dropping {} records without a diet group", n_dropped)

    labels = {}
    for dimension in CATEGORY_DIMENSIONS:
        raw_labels = get_raw_column(dimension)[keep]
        # Only look up each distinct code once
        code_map = {
            code: convert_code(code, dimension=dimension, database=survey_codes)
            for code in raw_labels.map(clean_label).unique()
        }
        labels[dimension] = raw_labels.map(clean_label).map(code_map).tolist()

    res = pd.DataFrame(
        {
            indicator: coerce_numeric_series(get_raw_column(indicator)[keep])
            .to_numpy()
            .astype(float)
            for indicator in INDICATORS
        },
        index=pd.MultiIndex.from_arrays(
            [labels[dimension] for dimension in CATEGORY_DIMENSIONS],
            names=list(CATEGORY_DIMENSIONS),
        ),
        columns=list(INDICATORS),
    )

    return res


def to_canonical_records(canonical: CanonicalDataFrame) -> list[CanonicalRecord]:
    """
    Convert canonical data into [CanonicalRecord][(m).]'s

    Parameters
    ----------
    canonical
        Canonical data

    Returns
    -------
    :
        One record per row. Unreported indicator values are set to zero
        and left out of `reported_indicators`.
    """
    indicator_values = canonical[list(INDICATORS)].to_numpy(dtype=float)
    res = []
    for labels, values in zip(canonical.index, indicator_values):
        label_d = dict(zip(canonical.index.names, labels))
        reported = ~np.isnan(values)
        indicator_kwargs = {
            FIELD_ATTRIBUTE_NAMES[indicator]: float(value) if is_reported else 0.0
            for indicator, value, is_reported in zip(INDICATORS, values, reported)
        }
        res.append(
            CanonicalRecord(
                diet_group=label_d[DIET_GROUP],
                gender=label_d[GENDER],
                age_group=label_d[AGE_GROUP],
                reported_indicators=frozenset(
                    indicator
                    for indicator, is_reported in zip(INDICATORS, reported)
                    if is_reported
                ),
                **indicator_kwargs,
            )
        )

    return res


def canonical_records_to_frame(
    records: Sequence[CanonicalRecord],
) -> CanonicalDataFrame:
    """
    Convert [CanonicalRecord][(m).]'s into canonical data

    This is the inverse of [to_canonical_records][(m).].

    Parameters
    ----------
    records
        Records to convert

    Returns
    -------
    :
        Canonical data. Indicators which aren't in a record's
        `reported_indicators` are `NaN`.
    """
    return pd.DataFrame(
        [
            [
                record.get(indicator)
                if indicator in record.reported_indicators
                else np.nan
                for indicator in INDICATORS
            ]
            for record in records
        ],
        index=pd.MultiIndex.from_tuples(
            [tuple(record.get(d) for d in CATEGORY_DIMENSIONS) for record in records],
            names=list(CATEGORY_DIMENSIONS),
        ),
        columns=list(INDICATORS),
        dtype=float,
    )
