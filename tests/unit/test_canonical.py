"""
Tests of `diet_impacts.canonical`
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from diet_impacts.canonical import (
    CanonicalRecord,
    canonical_records_to_frame,
    canonicalise,
    raw_records_to_frame,
    to_canonical_records,
)
from diet_impacts.constants import INDICATORS

NAN = np.nan


def test_canonicalise(example_raw_data):
    res = canonicalise(example_raw_data)

    exp = pd.DataFrame(
        [
            [2.5, 3.0, 10.0, 1.0, 0.5, 0.2],
            [3.5, 5.0, NAN, 2.0, 0.7, 0.4],
            [10.5, 20.0, 30.0, 4.0, 2.1, 1.2],
            [8.5, NAN, 20.0, 3.0, 1.9, 1.0],
            [4.0, 6.0, 12.0, 1.5, 0.8, 0.3],
        ],
        columns=list(INDICATORS),
        index=pd.MultiIndex.from_tuples(
            [
                ("vegan", "Female", "20-29"),
                ("vegan", "Male", "20-29"),
                ("high_meat", "Male", "50-59"),
                ("high_meat", "Female", "30-39"),
                ("vegetarian", "Female", "30-39"),
            ],
            names=["dietGroup", "gender", "ageGroup"],
        ),
    )

    pd.testing.assert_frame_equal(res, exp)


def test_canonicalise_drops_records_without_diet_group():
    raw = raw_records_to_frame(
        [
            {"diet": "", "sex": "female", "age": "20-29", "ghgs": "1"},
            {"diet": None, "sex": "female", "age": "20-29", "ghgs": "1"},
            {"diet": "   ", "sex": "male", "age": "30-39", "ghgs": "1"},
            {"diet": "fish", "sex": "male", "age": "30-39", "ghgs": "1"},
        ]
    )

    res = canonicalise(raw)

    assert res.index.tolist() == [("fish", "Male", "30-39")]


def test_canonicalise_missing_columns():
    raw = raw_records_to_frame(
        [
            {"diet": "vegan", "ghgs": "1.5"},
            {"diet": "meat", "ghgs": "2.5"},
        ]
    )

    res = canonicalise(raw)

    assert res.index.tolist() == [
        ("vegan", "Unknown", "Unknown"),
        ("low_meat", "Unknown", "Unknown"),
    ]
    np.testing.assert_equal(res["ghgs"].to_numpy(), [1.5, 2.5])
    for indicator in INDICATORS:
        if indicator == "ghgs":
            continue

        assert res[indicator].isnull().all()


def test_canonicalise_no_diet_group_column():
    raw = raw_records_to_frame([{"sex": "female", "ghgs": "1.5"}])

    res = canonicalise(raw)

    assert res.empty
    assert list(res.columns) == list(INDICATORS)
    assert list(res.index.names) == ["dietGroup", "gender", "ageGroup"]


def test_canonicalise_empty_input():
    res = canonicalise(pd.DataFrame())

    assert res.empty
    assert list(res.columns) == list(INDICATORS)


def test_canonicalise_explicit_column_map():
    raw = pd.DataFrame(
        [["vegan", "female", "20-29", "7"]],
        columns=["a", "b", "c", "d"],
    )

    res = canonicalise(
        raw,
        column_map={"dietGroup": "a", "gender": "b", "ageGroup": "c", "ghgs": "d"},
    )

    assert res.index.tolist() == [("vegan", "Female", "20-29")]
    assert res["ghgs"].tolist() == [7.0]


def test_canonicalise_custom_survey_codes():
    survey_codes = pd.DataFrame(
        [
            ("dietGroup", "v", "vegan"),
            ("gender", "f", "Female"),
            ("ageGroup", "young", "20-29"),
        ],
        columns=["dimension", "raw", "canonical"],
    )
    raw = raw_records_to_frame(
        [{"diet": "V", "sex": "f", "age": "young", "ghgs": 1.0}]
    )

    res = canonicalise(raw, survey_codes=survey_codes)

    assert res.index.tolist() == [("vegan", "Female", "20-29")]


def test_canonicalise_does_not_mutate_input(example_raw_data):
    start = example_raw_data.copy()

    canonicalise(example_raw_data)

    pd.testing.assert_frame_equal(example_raw_data, start)


def test_to_canonical_records(example_raw_data):
    res = to_canonical_records(canonicalise(example_raw_data))

    assert len(res) == 5
    assert res[0] == CanonicalRecord(
        diet_group="vegan",
        gender="Female",
        age_group="20-29",
        ghgs=2.5,
        land_use=3.0,
        water_scarcity=10.0,
        eutrophication=1.0,
        acidification=0.5,
        biodiversity=0.2,
        reported_indicators=INDICATORS,
    )
    # Missing value is zero-filled on the record but not reported
    assert res[1].water_scarcity == 0.0
    assert "waterScarcity" not in res[1].reported_indicators
    assert res[1].get("landUse") == 5.0


@pytest.mark.parametrize(
    "records",
    (
        pytest.param(
            [
                CanonicalRecord(
                    diet_group="fish",
                    gender="Male",
                    age_group="40-49",
                    ghgs=5.0,
                    land_use=0.0,
                    reported_indicators={"ghgs", "landUse"},
                ),
                CanonicalRecord(
                    diet_group="fish",
                    gender="Unknown",
                    age_group="Unknown",
                    ghgs=3.0,
                    reported_indicators={"ghgs"},
                ),
            ],
            id="partially-reported",
        ),
        pytest.param([], id="empty"),
    ),
)
def test_canonical_records_frame_inverse(records):
    frame = canonical_records_to_frame(records)

    assert to_canonical_records(frame) == records


def test_canonical_records_to_frame_unreported_is_nan():
    res = canonical_records_to_frame(
        [
            CanonicalRecord(
                diet_group="fish",
                gender="Male",
                age_group="40-49",
                ghgs=5.0,
                reported_indicators={"ghgs"},
            )
        ]
    )

    assert res.loc[("fish", "Male", "40-49"), "ghgs"] == 5.0
    assert res[[i for i in INDICATORS if i != "ghgs"]].isnull().all().all()
