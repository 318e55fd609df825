from __future__ import annotations

import math

from ..core.exceptions import InvalidCurrencyError, InvalidSalaryError, InvertedWindowError, ValidationError
from ..shifts.time_parser import HourMinute, parse_time_of_day


def require_positive_int(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise ValidationError(f"{field_name} must be a positive whole number")
    return int(value)


def validate_salary(text: str) -> float:
    cleaned = (text or "").strip().replace(",", "")
    try:
        salary = float(cleaned)
    except ValueError:
        raise InvalidSalaryError("Invalid salary amount. Please enter a positive number.") from None

    if math.isnan(salary) or math.isinf(salary) or salary <= 0:
        raise InvalidSalaryError("Invalid salary amount. Please enter a positive number.")
    return salary


def validate_currency(text: str) -> str:
    if not text or not text.strip():
        raise InvalidCurrencyError("Invalid currency. Please enter a currency code such as USD.")
    return text.strip()


def validate_time_window(start_text: str, end_text: str) -> tuple[HourMinute, HourMinute]:
    start = parse_time_of_day(start_text)
    end = parse_time_of_day(end_text)

    # Both sides live on the same calendar day, so tuple order is time order.
    if end <= start:
        raise InvertedWindowError("Start time must be before the end time.")
    return start, end
