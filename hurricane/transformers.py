from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Mapping, Tuple

import pandas as pd

from hurricane.constants import AVERAGE_KEY, MONTH_NAMES
from hurricane.errors import TransformError
from hurricane.table_parser import Dataset


@dataclass(frozen=True)
class TransformedSummary:
    years: Dict[str, int] = field(default_factory=dict)
    months: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {"years": dict(self.years), "months": dict(self.months)}


def _is_number(value) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def transform_hurricanes_data(dataset: Dataset) -> TransformedSummary:
    """
    Sums hurricane counts per year and per month.
    The Average column is a derived statistic, so it never contributes to either total.
    """
    if not isinstance(dataset, Mapping):
        raise TransformError(f"Hurricanes data must be a mapping, got {type(dataset).__name__}")

    years: Dict[str, int] = {}
    months: Dict[str, int] = {}

    for month, record in dataset.items():
        if not isinstance(record, Mapping):
            raise TransformError(f"Record for {month} must be a mapping, got {type(record).__name__}")

        for column, value in record.items():
            if column == AVERAGE_KEY or not _is_number(value):
                continue
            years[column] = years.get(column, 0) + value
            months[month] = months.get(month, 0) + value

    return TransformedSummary(years=years, months=months)


def summary_to_frames(summary: TransformedSummary) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Returns (years_df, months_df) with columns [year, hurricanes] and [month, hurricanes].
    Years are sorted ascending, months follow the calendar.
    """
    years_df = pd.DataFrame(
        [{"year": year, "hurricanes": total} for year, total in summary.years.items()],
        columns=["year", "hurricanes"],
    )
    if not years_df.empty:
        years_df = years_df.sort_values("year", key=lambda s: s.astype(int)).reset_index(drop=True)

    months_df = pd.DataFrame(
        [{"month": month, "hurricanes": summary.months[month]}
         for month in MONTH_NAMES if month in summary.months],
        columns=["month", "hurricanes"],
    )
    return years_df, months_df
