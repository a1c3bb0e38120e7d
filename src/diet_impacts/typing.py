"""
Type hints that are used throughout
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd
from typing_extensions import TypeAlias

RawRecord: TypeAlias = Mapping[str, Any]
"""
Type alias for a single row of input, as it comes out of the parser

The keys are the (unreconciled) column headers.
"""

RawDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for a collection of [RawRecord][(m).]'s

The columns are the headers exactly as they appear in the input.
There is no guarantee about their names or about the type of the values.
"""

CanonicalDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pd.DataFrame][pandas.DataFrame] shape of canonical records

The index is a `MultiIndex` with levels `["dietGroup", "gender", "ageGroup"]`
(it is not unique, there is one row per respondent record).
The columns are the indicators.
Values which were missing or unparseable in the input are `NaN`,
so they can be excluded when aggregating.

```python
                                   ghgs  landUse  ...
dietGroup  gender ageGroup
vegan      Female 20-29             2.5      NaN  ...
high_meat  Male   50-59            10.2      4.1  ...
```
"""

SummaryDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pd.DataFrame][pandas.DataFrame] shape of summary records

The index is a `MultiIndex` with levels `["dietGroup", "gender", "ageGroup"]`
and is unique.
Dimensions a bucket does not split by are reported as `"All"`.
The columns are the indicators and hold the mean of each bucket.

```python
                                   ghgs  landUse  ...
dietGroup  gender ageGroup
vegan      All    All               3.0      1.1  ...
All        Female All               5.4      2.2  ...
vegan      All    20-29             3.0      1.0  ...
```
"""
