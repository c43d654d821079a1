"""Default specializations and a downloadable upload template."""

from typing import List

import pandas as pd

from config.defaults import (
    CATEGORY_LABEL_COLUMN,
    CATEGORY_WEIGHT_COLUMN,
)
from models.category import Category

DEFAULT_SPECIALIZATIONS = [
    ("Engines & Vehicles", 12),
    ("Manufacturing", 18),
]


def default_categories() -> List[Category]:
    """The department's starting specializations, with fresh ids."""
    return [Category(label=label, weight=weight) for label, weight in DEFAULT_SPECIALIZATIONS]


def generate_categories_df() -> pd.DataFrame:
    """Template for the category upload: one row per specialization."""
    return pd.DataFrame([
        {CATEGORY_LABEL_COLUMN: label, CATEGORY_WEIGHT_COLUMN: weight}
        for label, weight in DEFAULT_SPECIALIZATIONS
    ])
