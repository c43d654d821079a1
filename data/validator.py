"""Schema validation for uploaded specialization files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import CATEGORY_ID_COLUMN, CATEGORY_LABEL_COLUMN, CATEGORY_WEIGHT_COLUMN


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


CATEGORY_REQUIRED_COLUMNS = [
    CATEGORY_LABEL_COLUMN,
    CATEGORY_WEIGHT_COLUMN,
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_categories(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, CATEGORY_REQUIRED_COLUMNS, "Specializations")
    if not result.is_valid:
        return result

    weights = pd.to_numeric(df[CATEGORY_WEIGHT_COLUMN], errors="coerce")
    if weights.isna().any():
        result.is_valid = False
        result.errors.append("Specializations: Instructors must be a number on every row.")
        return result

    if (weights < 1).any():
        result.is_valid = False
        result.errors.append("Specializations: Instructors must be at least 1.")

    if (weights % 1 != 0).any():
        result.is_valid = False
        result.errors.append("Specializations: Instructors must be whole numbers.")

    labels = df[CATEGORY_LABEL_COLUMN].fillna("").astype(str).str.strip()
    if (labels == "").any():
        result.is_valid = False
        result.errors.append("Specializations: Specialization name cannot be blank.")

    dupes = labels.duplicated(keep=False) & (labels != "")
    if dupes.any():
        result.warnings.append(
            f"Specializations: Duplicate names: {labels[dupes].unique().tolist()}. "
            "Each row is distributed separately."
        )

    if CATEGORY_ID_COLUMN in df.columns:
        ids = df[CATEGORY_ID_COLUMN].fillna("").astype(str).str.strip()
        dupe_ids = ids.duplicated(keep=False) & (ids != "")
        if dupe_ids.any():
            result.is_valid = False
            result.errors.append(
                f"Specializations: Duplicate IDs: {ids[dupe_ids].unique().tolist()}. "
                "Leave the ID blank to have one assigned."
            )

    return result
