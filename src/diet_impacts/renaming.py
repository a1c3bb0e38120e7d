"""
Renaming from the conventions used in the raw data to our conventions

This covers two things:

1. reconciling the input's column headers with our canonical fields
1. converting the category codes used in the survey to our labels

Neither raises for values it doesn't know about.
The input's headers have changed between revisions of the source file
and we would rather degrade (e.g. report an indicator as zero)
than fail to load at all.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, cast

import pandas as pd
from loguru import logger

from diet_impacts.constants import (
    AGE_GROUP,
    CANONICAL_FIELDS,
    DIET_GROUP,
    GENDER,
    UNKNOWN_LABEL,
)
from diet_impacts.exceptions import UnrecognisedValueError

UNRECOGNISED_CODE_FALLBACKS: dict[str, str] = {
    GENDER: UNKNOWN_LABEL,
    AGE_GROUP: UNKNOWN_LABEL,
}
"""
Label to use when a code isn't in the survey codes database, by dimension

Dimensions which aren't in here pass unrecognised codes through unchanged.
At the moment that is only the diet group,
which means that any new diet codes show up in the output as they are.
It is not clear that this asymmetry is intended,
but we keep it until someone decides otherwise.
"""

_WHITESPACE_RUN = re.compile(r"\s+")


def normalise_header(header: Any) -> str:
    """
    Normalise a column header so it can be compared with our aliases

    Parameters
    ----------
    header
        Header to normalise

    Returns
    -------
    :
        `header`, trimmed, lower-cased and with whitespace runs replaced by `"_"`

    Examples
    --------
    >>> normalise_header("  Diet Group ")
    'diet_group'
    >>> normalise_header("mean_GHGs")
    'mean_ghgs'
    """
    return _WHITESPACE_RUN.sub("_", str(header).strip()).lower()


def clean_label(value: Any) -> str:
    """
    Clean a category label

    Parameters
    ----------
    value
        Raw value

    Returns
    -------
    :
        `value` as a trimmed, lower-case string.
        Null values (`None`, `NaN`) give the empty string.
    """
    if value is None:
        return ""

    if not isinstance(value, str) and pd.isna(value):
        return ""

    return str(value).strip().lower()


def reconcile_columns(
    headers: Iterable[Any],
    aliases: pd.DataFrame | None = None,
) -> dict[str, str]:
    """
    Work out which input column to use for each canonical field

    For each canonical field, the first header (in input order)
    whose normalised form is one of the field's aliases is used.
    Fields for which there is no such header are left out of the result.

    Parameters
    ----------
    headers
        Headers that are in the input, in the order they appear

    aliases
        Accepted aliases for each canonical field.

        Must have the columns `"canonical"` and `"alias"`.
        If not supplied, we use
        [COLUMN_ALIASES][diet_impacts.databases.COLUMN_ALIASES].

    Returns
    -------
    :
        Map from canonical field to the header to use for it

    Examples
    --------
    >>> reconcile_columns(["Diet Group", "sex", "age_group", "mean_ghgs", "Bio"])
    {'dietGroup': 'Diet Group', 'gender': 'sex', 'ageGroup': 'age_group', \
'ghgs': 'mean_ghgs', 'biodiversity': 'Bio'}
    """
    if aliases is None:
        from diet_impacts.databases import COLUMN_ALIASES

        aliases = COLUMN_ALIASES

    headers_l = list(headers)
    headers_normalised = [normalise_header(h) for h in headers_l]

    canonical_fields = [
        *[f for f in CANONICAL_FIELDS if f in set(aliases["canonical"])],
        # Support callers who extend the schema with their own fields
        *[f for f in aliases["canonical"].unique() if f not in CANONICAL_FIELDS],
    ]

    res: dict[str, str] = {}
    for canonical_field in canonical_fields:
        field_aliases = set(
            aliases.loc[aliases["canonical"] == canonical_field, "alias"]
        )
        for header, header_normalised in zip(headers_l, headers_normalised):
            if header_normalised in field_aliases:
                res[canonical_field] = header
                break

    unmapped = [f for f in CANONICAL_FIELDS if f not in res]
    if unmapped:
        logger.debug(
            "No column found for {} in headers {}, treating as absent",
            unmapped,
            headers_l,
        )

    return res


_NO_DEFAULT = object()


def lookup_mapping(
    from_value: str,
    dimension: str,
    database: pd.DataFrame,
    from_key: str = "raw",
    to_key: str = "canonical",
    default: Any = _NO_DEFAULT,
) -> str:
    """
    Lookup a mapping

    Parameters
    ----------
    from_value
        Value to map from (i.e. what to look up in the `from_key` column)

    dimension
        Dimension to which `from_value` belongs

    database
        Database in which to look up the mapping

        (Not a real database, just a [pd.DataFrame][pandas.DataFrame],
        but it performs the same function.)

    from_key
        Key/column to map from

    to_key
        Key/column to map to

    default
        Value to return if `from_value` isn't in the database.

        If not supplied, an error is raised instead.

    Returns
    -------
    :
        Mapped value i.e. the equivalent value to `from_value` in `to_key`

    Raises
    ------
    UnrecognisedValueError
        `from_value` is not a recognised value in `from_key`
        for `dimension` and no `default` was supplied
    """
    database_dimension = database.loc[database["dimension"] == dimension]
    res_l = database_dimension.loc[
        database_dimension[from_key] == from_value, to_key
    ].tolist()

    if len(res_l) < 1:
        if default is not _NO_DEFAULT:
            return cast(str, default)

        raise UnrecognisedValueError(
            unrecognised_value=from_value,
            name=dimension,
            known_values=database_dimension[from_key].tolist(),
        )

    if len(res_l) > 1:  # pragma: no cover
        raise AssertionError(res_l)

    return cast(str, res_l[0])


def convert_code(
    code: Any, dimension: str, database: pd.DataFrame | None = None
) -> str:
    """
    Convert a survey code to our label

    Parameters
    ----------
    code
        Code to convert. It is cleaned with [clean_label][(m).] first.

    dimension
        Dimension to which `code` belongs

    database
        Database of survey codes.

        If not supplied, we use
        [SURVEY_CODES][diet_impacts.databases.SURVEY_CODES].

    Returns
    -------
    :
        Our label for `code`.
        Unrecognised codes are handled according to
        [UNRECOGNISED_CODE_FALLBACKS][(m).].
    """
    if database is None:
        from diet_impacts.databases import SURVEY_CODES

        database = SURVEY_CODES

    code_clean = clean_label(code)

    return lookup_mapping(
        from_value=code_clean,
        dimension=dimension,
        database=database,
        default=UNRECOGNISED_CODE_FALLBACKS.get(dimension, code_clean),
    )


def convert_diet_group_code(code: Any) -> str:
    """
    Convert a diet group code to our label

    Parameters
    ----------
    code
        Diet group code to convert

    Returns
    -------
    :
        Our label for `code`. Unrecognised codes are passed through (cleaned).

    Examples
    --------
    >>> convert_diet_group_code(" Veggie")
    'vegetarian'
    >>> convert_diet_group_code("flexitarian")
    'flexitarian'
    """
    return convert_code(code, dimension=DIET_GROUP)


def convert_gender_code(code: Any) -> str:
    """
    Convert a gender code to our label

    Parameters
    ----------
    code
        Gender code to convert

    Returns
    -------
    :
        Our label for `code`, `"Unknown"` if we don't recognise it
    """
    return convert_code(code, dimension=GENDER)


def convert_age_group_code(code: Any) -> str:
    """
    Convert an age group code to our label

    Parameters
    ----------
    code
        Age group code to convert

    Returns
    -------
    :
        Our label for `code`, `"Unknown"` if we don't recognise it
    """
    return convert_code(code, dimension=AGE_GROUP)
