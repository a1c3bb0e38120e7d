"""
Code to support our tests

This is here, rather than in our `tests` directory
because of the issues that come
when you turn your tests into a package using `__init__.py` files
(for details, see https://docs.pytest.org/en/7.1.x/explanation/goodpractices.html#choosing-an-import-mode).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd
from pandas_indexing.core import uniquelevel

EXAMPLE_HEADERS: tuple[str, ...] = (
    "mc_run_id",
    "grouping",
    "mean_ghgs",
    "mean_land",
    "mean_watscar",
    "mean_eut",
    "mean_ghgs_ch4",
    "mean_bio",
    "mean_acid",
    "diet_group",
    "sex",
    "age_group",
)
"""
Headers in the style of the original results file

Includes columns we don't use (e.g. `mean_ghgs_ch4`),
which must not be picked up by mistake.
"""

EXAMPLE_ROWS: tuple[tuple[Any, ...], ...] = (
    # mc_run_id, grouping, ghgs, land, watscar, eut, ghgs_ch4, bio, acid, diet, sex, age
    (1, "vegan_female_20-29", "2.5", "3", "10", "1", "0.1", "0.2", "0.5", "vegan", "female", "20-29"),  # noqa: E501
    (1, "vegan_male_20-29", "3.5", "5", "", "2", "0.1", "0.4", "0.7", "vegan", "male", "20-29"),  # noqa: E501
    (1, "meat100_male_50-59", "10,5", "20", "30", "4", "0.3", "1.2", "2.1", "meat100", "male", "50-59"),  # noqa: E501
    (1, "meat100_female_30-39", "8.5", "n/a", "20", "3", "0.3", "1.0", "1.9", "meat100", "female", "30-39"),  # noqa: E501
    (1, "veggie_female_30-39", "4.0", "6", "12", "1.5", "0.1", "0.3", "0.8", " Veggie ", "female", "30-39"),  # noqa: E501
    (1, "missing_diet", "100", "100", "100", "100", "1", "100", "100", "", "male", "20-29"),  # noqa: E501
)
"""
Example rows, in the same order as [EXAMPLE_HEADERS][(m).]
"""


def get_example_raw_data() -> pd.DataFrame:
    """
    Get example raw data

    Returns
    -------
    :
        Example raw data, as it would come out of the reader
        (i.e. everything as strings)
    """
    return pd.DataFrame(
        [[str(v) for v in row] for row in EXAMPLE_ROWS],
        columns=list(EXAMPLE_HEADERS),
    )


def write_example_csv(path: Path, extra_lines: tuple[str, ...] = ()) -> Path:
    """
    Write example raw data to disk

    Parameters
    ----------
    path
        Path to write to

    extra_lines
        Extra lines to add to the end of the file (e.g. malformed rows)

    Returns
    -------
    :
        `path`
    """
    lines = [
        ",".join(EXAMPLE_HEADERS),
        *[
            ",".join(
                # Quote values with decimal commas
                f'"{v}"' if "," in str(v) else str(v)
                for v in row
            )
            for row in EXAMPLE_ROWS
        ],
        *extra_lines,
    ]
    path.write_text("\n".join(lines) + "\n")

    return path


def assert_frame_equal(
    res: pd.DataFrame, exp: pd.DataFrame, rtol: float = 1e-8, **kwargs: Any
) -> None:
    """
    Assert two [pd.DataFrame][pandas.DataFrame]'s are equal.

    This is a very thin wrapper around
    [pd.testing.assert_frame_equal][pandas.testing.assert_frame_equal]
    that makes some use of [pandas_indexing][]
    to give slightly nicer and clearer errors.

    Parameters
    ----------
    res
        Result

    exp
        Expected value

    rtol
        Relative tolerance

    **kwargs
        Passed to [pd.testing.assert_frame_equal][pandas.testing.assert_frame_equal]

    Raises
    ------
    AssertionError
        The frames aren't equal
    """
    for idx_name in res.index.names:
        idx_diffs = uniquelevel(res, idx_name).symmetric_difference(  # type: ignore
            uniquelevel(exp, idx_name)  # type: ignore
        )
        if not idx_diffs.empty:
            msg = f"Differences in the {idx_name} (res on the left): {idx_diffs=}"
            raise AssertionError(msg)

    pd.testing.assert_frame_equal(
        res.reorder_levels(exp.index.names),
        exp,
        check_like=True,
        check_exact=False,
        rtol=rtol,
        **kwargs,
    )
