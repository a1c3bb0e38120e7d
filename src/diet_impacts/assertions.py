"""
Useful assertions
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd


def assert_has_index_levels(df: pd.DataFrame, levels: Collection[str]) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame] has the given index levels

    Parameters
    ----------
    df
        Data to check

    levels
        Levels which should be in `df`'s index

    Raises
    ------
    AssertionError
        `df` is missing some of the levels
    """
    missing_levels = [v for v in levels if v not in df.index.names]
    if missing_levels:
        msg = (
            f"The DataFrame is missing the following index levels: {missing_levels}. "
            f"Available index levels: {list(df.index.names)}"
        )
        raise AssertionError(msg)


def assert_data_is_all_numeric(df: pd.DataFrame) -> None:
    """
    Assert that all the data in a [pd.DataFrame][pandas.DataFrame] is numeric

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    AssertionError
        Some of `df`'s columns are not numeric
    """
    non_numeric = [
        c for c in df.columns if not pd.api.types.is_numeric_dtype(df[c].dtype)
    ]
    if non_numeric:
        msg = f"The following columns are not numeric: {non_numeric}"
        raise AssertionError(msg)


def assert_no_nans(df: pd.DataFrame) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame] has no `NaN` values

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    AssertionError
        `df` contains `NaN` values
    """
    if df.isnull().any().any():
        nan_rows = df[df.isnull().any(axis="columns")]
        msg = f"There are NaNs in the following rows:\n{nan_rows}"
        raise AssertionError(msg)


def assert_index_is_unique(df: pd.DataFrame) -> None:
    """
    Assert that the index of a [pd.DataFrame][pandas.DataFrame] is unique

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    AssertionError
        `df`'s index has duplicates
    """
    duplicated = df.index.duplicated(keep=False)
    if duplicated.any():
        msg = f"The index has duplicates:\n{df.index[duplicated]}"
        raise AssertionError(msg)
