from hurricane.constants import MONTH_NAMES
from hurricane.errors import InvalidMonthError


def is_month_abbreviation(value: str) -> bool:
    return value in MONTH_NAMES


def validate_month(value: str, field: str = "month") -> str:
    """
    Returns the value unchanged if it is one of the canonical abbreviations.
    Raises InvalidMonthError otherwise; matching is case sensitive.
    """
    if not isinstance(value, str) or not is_month_abbreviation(value):
        raise InvalidMonthError(f"{field} must be a valid month abbreviation (e.g., Jan, Feb, etc.)")
    return value


def next_month(value: str) -> str:
    """Returns the month after the given one, wrapping December to January."""
    index = MONTH_NAMES.index(validate_month(value))
    return MONTH_NAMES[(index + 1) % 12]
