"""
Pipeline from raw survey results to summary records
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

import attr
import pandas as pd
from attrs import define, field
from loguru import logger

from diet_impacts.aggregation import (
    ALL_GROUP_KINDS,
    CategoryLabels,
    GroupKind,
    SummaryRecord,
    aggregate,
    get_category_labels,
    get_empty_summary,
    to_summary_records,
)
from diet_impacts.assertions import (
    assert_data_is_all_numeric,
    assert_has_index_levels,
    assert_index_is_unique,
    assert_no_nans,
)
from diet_impacts.canonical import canonicalise, raw_records_to_frame
from diet_impacts.constants import CATEGORY_DIMENSIONS
from diet_impacts.exceptions import SourceAccessError
from diet_impacts.io import Source, read_raw_records
from diet_impacts.renaming import reconcile_columns
from diet_impacts.typing import RawDataFrame, RawRecord, SummaryDataFrame


class LoadStatus(Enum):
    """
    Status of loading the data
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@define
class DietDataResult:
    """
    Result of running [DietDataPipeline][(m).]
    """

    status: LoadStatus = LoadStatus.IDLE
    """
    Status of the load
    """

    summary: SummaryDataFrame = field(factory=get_empty_summary)
    """
    Summary records, in frame form
    """

    raw_data: RawDataFrame = field(factory=pd.DataFrame)
    """
    Raw rows, as they were parsed
    """

    labels: CategoryLabels = field(
        factory=lambda: CategoryLabels(diet_groups=(), genders=(), age_groups=())
    )
    """
    Distinct labels in `summary`, by dimension
    """

    parse_errors: tuple[str, ...] = field(factory=tuple, converter=tuple)
    """
    Rows which could not be parsed and were skipped
    """

    error: str | None = None
    """
    Description of why the load failed, if it did
    """

    @property
    def loading(self) -> bool:
        """
        Is the load in progress?
        """
        return self.status is LoadStatus.LOADING

    @property
    def records(self) -> list[SummaryRecord]:
        """
        Summary records
        """
        return to_summary_records(self.summary)


def summarise_raw_records(
    raw: RawDataFrame | Iterable[RawRecord],
    column_aliases: pd.DataFrame | None = None,
    survey_codes: pd.DataFrame | None = None,
    kinds: Iterable[GroupKind] = ALL_GROUP_KINDS,
) -> SummaryDataFrame:
    """
    Summarise raw records that are already in memory

    Parameters
    ----------
    raw
        Raw records.

        If these are mappings, the columns are reconciled
        using the keys of the first record only.

    column_aliases
        Column aliases to use when reconciling `raw`'s columns

    survey_codes
        Survey codes database to use when converting category codes

    kinds
        Kinds of grouping for which to calculate buckets

    Returns
    -------
    :
        Summary records
    """
    if isinstance(raw, pd.DataFrame):
        headers = list(raw.columns)
    else:
        raw_l = list(raw)
        # Headers come from the first record only, as they would from a file
        headers = list(raw_l[0].keys()) if raw_l else []
        raw = raw_records_to_frame(raw_l)

    column_map = reconcile_columns(headers, aliases=column_aliases)
    canonical = canonicalise(raw, column_map=column_map, survey_codes=survey_codes)

    return aggregate(canonical, kinds=kinds)


@define
class DietDataPipeline:
    """
    Pipeline from raw survey results to summary records

    The pipeline never raises because of problems with individual records.
    Those are handled by defaulting (see [canonicalise][diet_impacts.canonical.]).
    If the data can't be read at all,
    the returned result has status `FAILED` and an error message.
    """

    column_aliases: pd.DataFrame = field()
    """
    Accepted aliases for each canonical field
    """

    survey_codes: pd.DataFrame = field()
    """
    Mapping from survey codes to our labels
    """

    kinds: tuple[GroupKind, ...] = field(default=ALL_GROUP_KINDS, converter=tuple)
    """
    Kinds of grouping for which to calculate buckets
    """

    delimiter: str = ","
    """
    Delimiter between fields in the source
    """

    encoding: str = "utf-8-sig"
    """
    Encoding of the source
    """

    run_checks: bool = True
    """
    If `True`, run checks on the output

    The checks are cheap compared to reading the data,
    so you should only need to turn them off
    if you have a very good reason.
    """

    @column_aliases.default
    def default_column_aliases(self) -> pd.DataFrame:
        """
        Get default column aliases
        """
        from diet_impacts.databases import COLUMN_ALIASES

        return COLUMN_ALIASES

    @survey_codes.default
    def default_survey_codes(self) -> pd.DataFrame:
        """
        Get default survey codes
        """
        from diet_impacts.databases import SURVEY_CODES

        return SURVEY_CODES

    def summarise(self, raw: RawDataFrame | Iterable[RawRecord]) -> SummaryDataFrame:
        """
        Summarise raw records

        Parameters
        ----------
        raw
            Raw records

        Returns
        -------
        :
            Summary records
        """
        res = summarise_raw_records(
            raw,
            column_aliases=self.column_aliases,
            survey_codes=self.survey_codes,
            kinds=self.kinds,
        )

        if self.run_checks:
            assert_has_index_levels(res, CATEGORY_DIMENSIONS)
            assert_data_is_all_numeric(res)
            assert_no_nans(res)
            assert_index_is_unique(res)

        return res

    def __call__(self, source: Source) -> DietDataResult:
        """
        Load and summarise survey results

        Parameters
        ----------
        source
            Path or URL from which to load

        Returns
        -------
        :
            Result of the load
        """
        logger.info("Loading diet data from {}", source)
        try:
            raw_read = read_raw_records(
                source, delimiter=self.delimiter, encoding=self.encoding
            )

        except SourceAccessError as exc:
            logger.warning("Failed to load diet data: {}", exc)
            return DietDataResult(status=LoadStatus.FAILED, error=str(exc))

        except (
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
            UnicodeDecodeError,
        ) as exc:
            msg = f"Could not parse diet data from {str(source)!r}: {exc}"
            logger.warning(msg)
            return DietDataResult(status=LoadStatus.FAILED, error=msg)

        if raw_read.parse_errors:
            logger.warning(
                "Skipped {} malformed rows in {}", len(raw_read.parse_errors), source
            )

        summary = self.summarise(raw_read.data)
        logger.info("Summarised diet data into {} buckets", summary.shape[0])

        return DietDataResult(
            status=LoadStatus.READY,
            summary=summary,
            raw_data=raw_read.data,
            labels=get_category_labels(summary),
            parse_errors=raw_read.parse_errors,
        )


@define
class DietDataSession:
    """
    Holder of the latest result of loading diet data

    This is for callers who want to display the data
    and re-render as the load progresses.
    There is no locking: if loads overlap,
    whichever finishes last determines `result`.
    """

    pipeline: DietDataPipeline = field(factory=DietDataPipeline)
    """
    Pipeline to use for loading
    """

    result: DietDataResult = field(factory=DietDataResult)
    """
    Latest result
    """

    def load(self, source: Source) -> DietDataResult:
        """
        Load data, updating `result` as we go

        While loading, `result` keeps the previous data
        (so a display doesn't go blank) but has status `LOADING`.

        Parameters
        ----------
        source
            Path or URL from which to load

        Returns
        -------
        :
            Result of the load (also stored in `result`)

        Raises
        ------
        Exception
            The pipeline raised (e.g. its output checks failed).
            `result` is set to a `FAILED` result before re-raising.
        """
        self.result = attr.evolve(self.result, status=LoadStatus.LOADING, error=None)
        try:
            self.result = self.pipeline(source)
        except Exception as exc:
            logger.warning("Loading diet data from {} raised: {}", source, exc)
            self.result = DietDataResult(status=LoadStatus.FAILED, error=str(exc))
            raise

        return self.result

