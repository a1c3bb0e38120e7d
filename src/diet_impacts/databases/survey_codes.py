"""
Survey codes database
"""

from __future__ import annotations

import pandas as pd

SURVEY_CODES = pd.DataFrame(
    [
        ("dietGroup", "vegan", "vegan"),
        ("dietGroup", "veggie", "vegetarian"),
        ("dietGroup", "fish", "fish"),
        ("dietGroup", "meat", "low_meat"),
        ("dietGroup", "meat50", "medium_meat"),
        ("dietGroup", "meat100", "high_meat"),
        ("gender", "female", "Female"),
        ("gender", "male", "Male"),
        ("ageGroup", "20-29", "20-29"),
        ("ageGroup", "30-39", "30-39"),
        ("ageGroup", "40-49", "40-49"),
        ("ageGroup", "50-59", "50-59"),
        ("ageGroup", "60-69", "60-69"),
        ("ageGroup", "70-79", "70-79"),
    ],
    columns=["dimension", "raw", "canonical"],
)
"""
Mapping from the codes used in the raw survey data to our labels

The raw codes are stored cleaned, i.e. trimmed and lower-case.
"""
