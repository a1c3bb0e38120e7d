"""
Column aliases database

Different revisions of the survey results use different headers
for the same information.
This records which (normalised) headers we accept for each canonical field.
"""

from __future__ import annotations

import pandas as pd

COLUMN_ALIASES = pd.DataFrame(
    [
        ("dietGroup", "diet_group"),
        ("dietGroup", "dietgroup"),
        ("dietGroup", "diet"),
        ("gender", "sex"),
        ("gender", "gender"),
        ("ageGroup", "age_group"),
        ("ageGroup", "agegroup"),
        ("ageGroup", "age"),
        ("ghgs", "mean_ghgs"),
        ("ghgs", "ghgs"),
        ("ghgs", "greenhouse_gas"),
        ("landUse", "mean_land"),
        ("landUse", "land"),
        ("landUse", "land_use"),
        ("waterScarcity", "mean_watscar"),
        ("waterScarcity", "water"),
        ("waterScarcity", "water_scarcity"),
        ("eutrophication", "mean_eut"),
        ("eutrophication", "eutrophication"),
        ("acidification", "mean_acid"),
        ("acidification", "acidification"),
        ("biodiversity", "mean_bio"),
        ("biodiversity", "biodiversity"),
        ("biodiversity", "bio"),
    ],
    columns=["canonical", "alias"],
)
"""
Accepted aliases for each canonical field

Aliases are stored in normalised form,
i.e. lower-case, trimmed and with whitespace replaced by underscores
(see [normalise_header][diet_impacts.renaming.normalise_header]).
Within each canonical field, the order is the order of preference
(although in practice, the first matching header in the input wins).
"""
