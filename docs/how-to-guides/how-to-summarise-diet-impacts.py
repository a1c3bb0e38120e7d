# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.6
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # How to summarise diet impacts
#
# Here we show how to go from a survey results file
# to per-bucket means of each environmental-impact indicator,
# ready for charting.

# %% [markdown]
# ## Imports

# %%
import tempfile
from pathlib import Path

from diet_impacts.aggregation import GroupKind
from diet_impacts.normalisation import normalise_indicators, select_buckets
from diet_impacts.pipeline import DietDataPipeline, DietDataSession
from diet_impacts.renaming import reconcile_columns
from diet_impacts.testing import EXAMPLE_HEADERS, write_example_csv

# %% [markdown]
# ## Write some example data
#
# In practice, you will already have a results file.
# Here we write a small one so the example is self-contained.
# Note that some values are missing or unparseable
# and that one row has no diet group.

# %%
tmp_dir = Path(tempfile.mkdtemp())
source = write_example_csv(tmp_dir / "results.csv")
print(source.read_text())

# %% [markdown]
# ## Reconciling the columns
#
# The headers vary between revisions of the survey.
# The pipeline works out which header holds each field for you,
# but you can also do it yourself to check what will be picked up.

# %%
reconcile_columns(EXAMPLE_HEADERS)

# %% [markdown]
# ## Running the pipeline
#
# The pipeline never raises because of problems with the data.
# Instead, it returns a result with a status.

# %%
pipeline = DietDataPipeline()
result = pipeline(source)
result.status

# %%
result.summary

# %% [markdown]
# The distinct labels in each dimension are also available,
# e.g. for populating filters.

# %%
result.labels

# %% [markdown]
# If you prefer working with records rather than frames,
# they are available too.

# %%
result.records[0].as_dict()

# %% [markdown]
# ## Normalising for display
#
# When stacking the indicators in a chart,
# you will probably want to normalise them first.
# Each indicator is scaled by its maximum over the buckets being shown
# and then weighted.

# %%
diet_group_buckets = select_buckets(result.summary, GroupKind.DIET_GROUP)
normalise_indicators(diet_group_buckets)

# %% [markdown]
# ## Handling failures
#
# If the source can't be read, the result says so.

# %%
failed = pipeline(tmp_dir / "missing.csv")
failed.status, failed.error

# %% [markdown]
# ## Keeping track of the latest load
#
# If you're displaying the data,
# a session holds onto the latest result.
# While a load is in progress, the previous data stays available.

# %%
session = DietDataSession(pipeline=pipeline)
session.load(source)
session.result.status
