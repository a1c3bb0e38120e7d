"""
Tests of `diet_impacts.renaming`
"""

from __future__ import annotations

import re

import numpy as np
import pandas as pd
import pytest

from diet_impacts.databases import SURVEY_CODES
from diet_impacts.exceptions import UnrecognisedValueError
from diet_impacts.renaming import (
    clean_label,
    convert_age_group_code,
    convert_diet_group_code,
    convert_gender_code,
    lookup_mapping,
    normalise_header,
    reconcile_columns,
)

cases_to_check_diet_group = pytest.mark.parametrize(
    "raw_code, exp",
    tuple(
        pytest.param(raw_code, exp, id=f"{raw_code}-{exp}")
        for raw_code, exp in (
            ("vegan", "vegan"),
            ("veggie", "vegetarian"),
            ("fish", "fish"),
            ("meat", "low_meat"),
            ("meat50", "medium_meat"),
            ("meat100", "high_meat"),
        )
    ),
)


@cases_to_check_diet_group
def test_convert_diet_group_code(raw_code, exp):
    assert convert_diet_group_code(raw_code) == exp


@cases_to_check_diet_group
def test_convert_diet_group_code_idempotent(raw_code, exp):
    assert convert_diet_group_code(convert_diet_group_code(raw_code)) == exp


@pytest.mark.parametrize(
    "raw_code, exp",
    (
        pytest.param(" Vegan ", "vegan", id="whitespace-and-case"),
        pytest.param("MEAT50", "medium_meat", id="upper-case"),
        pytest.param("pescatarian", "pescatarian", id="unrecognised-passed-through"),
        pytest.param("Flexi ", "flexi", id="unrecognised-cleaned"),
    ),
)
def test_convert_diet_group_code_cleaning(raw_code, exp):
    assert convert_diet_group_code(raw_code) == exp


@pytest.mark.parametrize(
    "raw_code, exp",
    (
        ("female", "Female"),
        ("male", "Male"),
        (" Female", "Female"),
        ("MALE", "Male"),
        ("other", "Unknown"),
        ("", "Unknown"),
        (None, "Unknown"),
        (np.nan, "Unknown"),
        # Already converted
        ("Unknown", "Unknown"),
    ),
)
def test_convert_gender_code(raw_code, exp):
    assert convert_gender_code(raw_code) == exp


@pytest.mark.parametrize(
    "raw_code, exp",
    (
        ("20-29", "20-29"),
        ("30-39", "30-39"),
        ("40-49", "40-49"),
        ("50-59", "50-59"),
        ("60-69", "60-69"),
        ("70-79", "70-79"),
        (" 70-79 ", "70-79"),
        ("80-89", "Unknown"),
        ("", "Unknown"),
        (None, "Unknown"),
    ),
)
def test_convert_age_group_code(raw_code, exp):
    assert convert_age_group_code(raw_code) == exp


def test_lookup_mapping_unknown_error():
    with pytest.raises(
        UnrecognisedValueError,
        match=re.escape(
            "'meat5' is not a recognised value for dietGroup. "
            "Did you mean 'meat50' or 'meat' or 'meat100'? "
            "The full list of known values is:"
        ),
    ):
        lookup_mapping("meat5", dimension="dietGroup", database=SURVEY_CODES)


def test_lookup_mapping_default():
    assert (
        lookup_mapping(
            "meat5", dimension="dietGroup", database=SURVEY_CODES, default="other"
        )
        == "other"
    )


@pytest.mark.parametrize(
    "value, exp",
    (
        ("  Vegan\t", "vegan"),
        ("", ""),
        (None, ""),
        (np.nan, ""),
        (20, "20"),
    ),
)
def test_clean_label(value, exp):
    assert clean_label(value) == exp


@pytest.mark.parametrize(
    "header, exp",
    (
        ("diet_group", "diet_group"),
        (" Diet Group ", "diet_group"),
        ("Diet   Group", "diet_group"),
        ("MEAN_GHGS", "mean_ghgs"),
    ),
)
def test_normalise_header(header, exp):
    assert normalise_header(header) == exp


@pytest.mark.parametrize(
    "headers, exp",
    (
        pytest.param(
            [
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
            ],
            {
                "dietGroup": "diet_group",
                "gender": "sex",
                "ageGroup": "age_group",
                "ghgs": "mean_ghgs",
                "landUse": "mean_land",
                "waterScarcity": "mean_watscar",
                "eutrophication": "mean_eut",
                "acidification": "mean_acid",
                "biodiversity": "mean_bio",
            },
            id="original-results-file",
        ),
        pytest.param(
            ["Diet", " GENDER ", "Age Group", "GHGs", "Land Use", "Water"],
            {
                "dietGroup": "Diet",
                "gender": " GENDER ",
                "ageGroup": "Age Group",
                "ghgs": "GHGs",
                "landUse": "Land Use",
                "waterScarcity": "Water",
            },
            id="spelling-variations",
        ),
        pytest.param(
            ["diet", "diet_group"],
            {"dietGroup": "diet"},
            id="first-matching-header-wins",
        ),
        pytest.param(
            ["respondent", "value"],
            {},
            id="nothing-matches",
        ),
        pytest.param(
            [],
            {},
            id="no-headers",
        ),
    ),
)
def test_reconcile_columns(headers, exp):
    assert reconcile_columns(headers) == exp


def test_reconcile_columns_custom_aliases():
    aliases = pd.DataFrame(
        [
            ("dietGroup", "ernaehrung"),
            ("ghgs", "thg"),
        ],
        columns=["canonical", "alias"],
    )

    res = reconcile_columns(["Ernaehrung", "THG", "diet_group"], aliases=aliases)

    assert res == {"dietGroup": "Ernaehrung", "ghgs": "THG"}


def test_reconcile_columns_does_not_mutate_input():
    headers = ["Diet Group", "sex"]

    reconcile_columns(headers)

    assert headers == ["Diet Group", "sex"]
