"""
Aggregated environmental impacts of diets, by diet group, gender and age group.
"""

import importlib.metadata

__version__ = importlib.metadata.version("diet-impacts")
