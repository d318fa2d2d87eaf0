from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

import numpy as np

from hurricane.constants import AVERAGE_KEY, MONTH_NAMES
from hurricane.errors import CalculationError
from hurricane.table_parser import Dataset

ZERO_AVERAGE = Decimal("0.00")
ZERO_AVERAGE_SUBSTITUTE = Decimal("0.01")
# Large averages round to 100.0; reported possibilities stay below 100.
MAX_POSSIBILITY = 99.99


def _average_of(month: str, record) -> Decimal:
    try:
        raw = record[AVERAGE_KEY]
    except (KeyError, TypeError):
        raise CalculationError(f"No {AVERAGE_KEY} recorded for {month}") from None

    if isinstance(raw, bool) or not isinstance(raw, (int, float, Decimal, str)):
        raise CalculationError(f"Invalid {AVERAGE_KEY} for {month}: {raw!r}")
    try:
        avg = Decimal(str(raw).strip())
    except InvalidOperation:
        raise CalculationError(f"Invalid {AVERAGE_KEY} for {month}: {raw!r}") from None
    if not avg.is_finite() or avg < 0:
        raise CalculationError(f"Invalid {AVERAGE_KEY} for {month}: {raw!r}")
    return avg


def estimate_possibility(month: str, dataset: Dataset) -> Optional[float]:
    """
    Using the Poisson distribution, estimates the possibility (in %) of at least
    one hurricane in the given month, taking the month's historical Average as the rate.
    The result lies in [0, 100): it is capped at 99.99.
    Returns None when the dataset has no row for the month.
    """
    record = dataset.get(month)
    if record is None:
        return None

    avg = _average_of(month, record)
    # Average 0.00 is read as 0.01 so the estimate is never 0%.
    if avg == ZERO_AVERAGE:
        avg = ZERO_AVERAGE_SUBSTITUTE

    probability_of_zero = np.exp(-float(avg))
    probability_of_at_least_one = 1 - probability_of_zero
    return min(round(float(probability_of_at_least_one * 100), 2), MAX_POSSIBILITY)


def estimate_all(dataset: Dataset) -> Dict[str, float]:
    """Possibility for every month present in the dataset, in calendar order."""
    return {
        month: estimate_possibility(month, dataset)
        for month in MONTH_NAMES
        if month in dataset
    }
