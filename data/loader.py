"""File upload parsing: CSV/XLSX into Category lists."""

import pandas as pd
from typing import List

from config.defaults import CATEGORY_ID_COLUMN, CATEGORY_LABEL_COLUMN, CATEGORY_WEIGHT_COLUMN
from models.category import Category


def parse_categories(df: pd.DataFrame) -> List[Category]:
    """Convert a specializations DataFrame into Category objects, keeping row order."""
    categories = []
    has_ids = CATEGORY_ID_COLUMN in df.columns
    for _, row in df.iterrows():
        kwargs = {}
        raw_id = row.get(CATEGORY_ID_COLUMN) if has_ids else None
        # Blank ids get a fresh one from Category
        if pd.notna(raw_id) and str(raw_id).strip():
            kwargs["id"] = str(raw_id).strip()
        categories.append(Category(
            label=str(row[CATEGORY_LABEL_COLUMN]).strip(),
            weight=int(row[CATEGORY_WEIGHT_COLUMN]),
            **kwargs,
        ))
    return categories


def categories_to_df(categories: List[Category]) -> pd.DataFrame:
    """Inverse of parse_categories, for downloading the current inputs."""
    return pd.DataFrame([
        {CATEGORY_ID_COLUMN: c.id, CATEGORY_LABEL_COLUMN: c.label, CATEGORY_WEIGHT_COLUMN: c.weight}
        for c in categories
    ])


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype={CATEGORY_ID_COLUMN: str})
    elif name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype={CATEGORY_ID_COLUMN: str})
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
