"""
Databases of the naming conventions and codes we know about
"""

from __future__ import annotations

from diet_impacts.databases.column_aliases import COLUMN_ALIASES
from diet_impacts.databases.survey_codes import SURVEY_CODES

__all__ = ["COLUMN_ALIASES", "SURVEY_CODES"]
