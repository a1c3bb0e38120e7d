"""
Reading of the raw survey results
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd
from attrs import define, field
from loguru import logger
from typing_extensions import TypeAlias

from diet_impacts.exceptions import SourceAccessError
from diet_impacts.typing import RawDataFrame

Source: TypeAlias = Union[str, Path]
"""
Type alias for something we can read from (a path or a URL)
"""


@define
class RawReadResult:
    """
    Result of reading raw survey results
    """

    data: RawDataFrame
    """
    Rows which were parsed successfully

    All values are strings, exactly as they appear in the input
    (empty cells are empty strings).
    """

    parse_errors: tuple[str, ...] = field(factory=tuple, converter=tuple)
    """
    Description of each row which could not be parsed

    These rows are not in `data`.
    """


def read_raw_records(
    source: Source,
    delimiter: str = ",",
    encoding: str = "utf-8-sig",
) -> RawReadResult:
    """
    Read raw survey results

    Rows which can't be parsed (e.g. they have too many fields)
    are skipped and reported in the result rather than raising.

    Parameters
    ----------
    source
        Path or URL from which to read

    delimiter
        Delimiter between fields

    encoding
        Encoding of the source.

        The default strips any byte order mark, which spreadsheet tools
        like to put at the start of CSV files.

    Returns
    -------
    :
        Parsed rows and any row-level parse errors

    Raises
    ------
    SourceAccessError
        `source` could not be read (e.g. it doesn't exist)

    pandas.errors.ParserError
        `source` could be read, but not parsed at all

    pandas.errors.EmptyDataError
        `source` is empty
    """
    parse_errors: list[str] = []

    def handle_bad_line(bad_line: list[str]) -> None:
        msg = f"Skipping malformed row with {len(bad_line)} fields: {bad_line}"
        logger.warning(msg)
        parse_errors.append(msg)

        # Returning None tells pandas to skip the row
        return None

    try:
        data = pd.read_csv(
            source,
            sep=delimiter,
            encoding=encoding,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=handle_bad_line,
        )
    except OSError as exc:
        # Covers missing files and unsuccessful HTTP responses
        raise SourceAccessError(source=str(source), reason=str(exc)) from exc

    logger.debug(
        "Read {} rows with columns {} from {}", data.shape[0], list(data.columns), source
    )

    return RawReadResult(data=data, parse_errors=parse_errors)
