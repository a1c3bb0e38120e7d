"""
Constants used throughout
"""

from __future__ import annotations

DIET_GROUP: str = "dietGroup"
"""
Name of the diet group field/index level
"""

GENDER: str = "gender"
"""
Name of the gender field/index level
"""

AGE_GROUP: str = "ageGroup"
"""
Name of the age group field/index level
"""

CATEGORY_DIMENSIONS: tuple[str, ...] = (DIET_GROUP, GENDER, AGE_GROUP)
"""
The category dimensions, in the order they appear in the index of our frames
"""

INDICATORS: tuple[str, ...] = (
    "ghgs",
    "landUse",
    "waterScarcity",
    "eutrophication",
    "acidification",
    "biodiversity",
)
"""
The environmental-impact indicators

These are, in order, greenhouse-gas emissions, land use, water scarcity,
eutrophication, acidification and biodiversity impact.
All are reported per respondent per day.
"""

CANONICAL_FIELDS: tuple[str, ...] = (*CATEGORY_DIMENSIONS, *INDICATORS)
"""
All fields of a canonical record
"""

ALL_LABEL: str = "All"
"""
Label reported for dimensions that a bucket does not split by
"""

UNKNOWN_LABEL: str = "Unknown"
"""
Label used for gender and age group codes we do not recognise
"""

DEFAULT_NORMALISATION_WEIGHTS: dict[str, float] = {
    "ghgs": 1.0,
    "landUse": 0.8,
    "waterScarcity": 0.6,
    "eutrophication": 0.5,
    "acidification": 0.5,
    "biodiversity": 0.4,
}
"""
Default weight applied to each indicator after normalising by its maximum

These are hand-chosen so that the indicators stack to comparable heights
when charted. They are not derived from the data.
"""

FIELD_ATTRIBUTE_NAMES: dict[str, str] = {
    "dietGroup": "diet_group",
    "gender": "gender",
    "ageGroup": "age_group",
    "ghgs": "ghgs",
    "landUse": "land_use",
    "waterScarcity": "water_scarcity",
    "eutrophication": "eutrophication",
    "acidification": "acidification",
    "biodiversity": "biodiversity",
}
"""
Map from field name (as used in frames and output) to record attribute name
"""
