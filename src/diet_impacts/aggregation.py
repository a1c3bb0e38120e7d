"""
Aggregation of canonical records into per-bucket means
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

import pandas as pd
from attrs import define
from pandas_indexing.core import uniquelevel

from diet_impacts import constants
from diet_impacts.constants import (
    AGE_GROUP,
    ALL_LABEL,
    CATEGORY_DIMENSIONS,
    DIET_GROUP,
    FIELD_ATTRIBUTE_NAMES,
    GENDER,
    INDICATORS,
)
from diet_impacts.typing import CanonicalDataFrame, SummaryDataFrame


class GroupKind(Enum):
    """
    The ways in which records can be grouped into buckets

    The value of each member is the dimensions it splits by.
    All other dimensions are reported as `"All"`.
    """

    # Member names shadow the constants inside the class body
    DIET_GROUP = (constants.DIET_GROUP,)
    GENDER = (constants.GENDER,)
    AGE_GROUP = (constants.AGE_GROUP,)
    DIET_GROUP_GENDER = (constants.DIET_GROUP, constants.GENDER)
    DIET_GROUP_AGE_GROUP = (constants.DIET_GROUP, constants.AGE_GROUP)
    ALL = ()

    @property
    def dimensions(self) -> tuple[str, ...]:
        """
        Dimensions this kind of grouping splits by
        """
        return self.value


ALL_GROUP_KINDS: tuple[GroupKind, ...] = tuple(GroupKind)
"""
All the kinds of grouping, in the order their buckets are emitted

There is deliberately no kind which splits by
diet group, gender and age group at the same time.
"""


@define(frozen=True)
class SummaryRecord:
    """
    Mean of each indicator over one bucket
    """

    diet_group: str
    gender: str
    age_group: str
    ghgs: float
    land_use: float
    water_scarcity: float
    eutrophication: float
    acidification: float
    biodiversity: float

    def get(self, field_name: str) -> Any:
        """
        Get the value of a field using its canonical name (e.g. `"landUse"`)
        """
        return getattr(self, FIELD_ATTRIBUTE_NAMES[field_name])

    def as_dict(self) -> dict[str, Any]:
        """
        Convert to a dictionary, keyed by canonical field name

        This is the schema that downstream consumers (e.g. charts) expect.
        """
        return {
            field_name: getattr(self, attribute_name)
            for field_name, attribute_name in FIELD_ATTRIBUTE_NAMES.items()
        }


@define(frozen=True)
class CategoryLabels:
    """
    Distinct labels in a set of summary records, by dimension

    The labels are in the order they first appear in the summary records.
    """

    diet_groups: tuple[str, ...]
    genders: tuple[str, ...]
    age_groups: tuple[str, ...]


def get_empty_summary() -> SummaryDataFrame:
    """
    Get a summary frame with no buckets
    """
    return pd.DataFrame(
        [],
        index=pd.MultiIndex.from_tuples([], names=list(CATEGORY_DIMENSIONS)),
        columns=list(INDICATORS),
        dtype=float,
    )


def aggregate_bucket_means(
    canonical: CanonicalDataFrame, kind: GroupKind
) -> SummaryDataFrame:
    """
    Calculate the mean of each indicator in each bucket for a kind of grouping

    `NaN` values are not counted as samples,
    i.e. they are excluded from the sum and the count.
    If a bucket has no samples for an indicator, its mean is zero.

    Parameters
    ----------
    canonical
        Canonical records

    kind
        Kind of grouping to use to put records into buckets

    Returns
    -------
    :
        Mean of each indicator in each bucket.
        Buckets are in the order in which they are first seen in `canonical`.

    Examples
    --------
    >>> canonical = pd.DataFrame(
    ...     [[10.0], [float("nan")], [20.0], [4.0]],
    ...     columns=["ghgs"],
    ...     index=pd.MultiIndex.from_tuples(
    ...         [
    ...             ("vegan", "Female", "20-29"),
    ...             ("vegan", "Male", "20-29"),
    ...             ("vegan", "Male", "30-39"),
    ...             ("fish", "Female", "20-29"),
    ...         ],
    ...         names=["dietGroup", "gender", "ageGroup"],
    ...     ),
    ... )
    >>> aggregate_bucket_means(canonical, GroupKind.DIET_GROUP)[
    ...     ["ghgs"]
    ... ]  # doctest: +NORMALIZE_WHITESPACE
                              ghgs
    dietGroup gender ageGroup
    vegan     All    All      15.0
    fish      All    All       4.0
    """
    if canonical.empty:
        return get_empty_summary()

    indicators = [i for i in INDICATORS if i in canonical.columns]
    values = canonical[indicators].reset_index(drop=True)

    keys = canonical.index.to_frame(index=False)
    for dimension in CATEGORY_DIMENSIONS:
        if dimension not in kind.dimensions:
            keys[dimension] = ALL_LABEL

    grouped = values.groupby(
        [keys[dimension] for dimension in CATEGORY_DIMENSIONS], sort=False
    )
    sums = grouped.sum()
    counts = grouped.count()
    means = sums.div(counts).where(counts > 0, 0.0)

    return means.reindex(columns=list(INDICATORS), fill_value=0.0)


def aggregate(
    canonical: CanonicalDataFrame,
    kinds: Iterable[GroupKind] = ALL_GROUP_KINDS,
) -> SummaryDataFrame:
    """
    Aggregate canonical records into summary records

    Parameters
    ----------
    canonical
        Canonical records

    kinds
        Kinds of grouping for which to calculate buckets

    Returns
    -------
    :
        Summary records for every bucket of every kind in `kinds`.
        The buckets of each kind are grouped together,
        in the order given by `kinds`.
    """
    res_l = [aggregate_bucket_means(canonical, kind) for kind in kinds]
    res_l = [v for v in res_l if not v.empty]
    if not res_l:
        return get_empty_summary()

    return pd.concat(res_l)


def to_summary_records(summary: SummaryDataFrame) -> list[SummaryRecord]:
    """
    Convert a summary frame to [SummaryRecord][(m).]'s

    Parameters
    ----------
    summary
        Summary frame

    Returns
    -------
    :
        One record per row of `summary`, in the same order
    """
    res = []
    for labels, values in zip(
        summary.index, summary[list(INDICATORS)].to_numpy(dtype=float)
    ):
        label_d = dict(zip(summary.index.names, labels))
        res.append(
            SummaryRecord(
                diet_group=label_d[DIET_GROUP],
                gender=label_d[GENDER],
                age_group=label_d[AGE_GROUP],
                **{
                    FIELD_ATTRIBUTE_NAMES[indicator]: float(value)
                    for indicator, value in zip(INDICATORS, values)
                },
            )
        )

    return res


def get_category_labels(summary: SummaryDataFrame) -> CategoryLabels:
    """
    Get the distinct labels of each dimension in a summary frame

    Parameters
    ----------
    summary
        Summary frame

    Returns
    -------
    :
        Distinct labels, in the order they first appear in `summary`
    """
    return CategoryLabels(
        diet_groups=tuple(uniquelevel(summary, DIET_GROUP)),
        genders=tuple(uniquelevel(summary, GENDER)),
        age_groups=tuple(uniquelevel(summary, AGE_GROUP)),
    )
