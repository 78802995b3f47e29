from __future__ import annotations

import pandas as pd

from city_browser.core.city import CITY_FIELDS
from city_browser.validation.errors import ValidationIssue, ValidationError


def validate_city_frame(df: pd.DataFrame) -> None:
    issues: list[ValidationIssue] = []

    missing = [col for col in CITY_FIELDS if col not in df.columns]
    if missing:
        issues.append(
            ValidationIssue("CITIES_MISSING_COLUMNS", f"Missing columns: {', '.join(missing)}.")
        )
        # The remaining checks need the columns to exist
        raise ValidationError(issues)

    duplicated = df["id"][df["id"].duplicated()].unique()
    if len(duplicated):
        shown = ", ".join(str(v) for v in duplicated[:5])
        issues.append(
            ValidationIssue("CITIES_DUPLICATE_ID", f"Duplicate city ids: {shown}.", column="id")
        )

    population = pd.to_numeric(df["population"], errors="coerce")
    if (population < 0).any():
        issues.append(
            ValidationIssue(
                "CITIES_NEGATIVE_POPULATION",
                "Population must be non-negative.",
                column="population",
            )
        )

    if issues:
        raise ValidationError(issues)
