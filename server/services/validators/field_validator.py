"""This module provides validation functions for operator-entered field values."""

from datetime import date, datetime
from typing import Optional

from utilities.constants.field_enums import (DATE_FORMAT, FALSE_VALUES,
                                             TRUE_VALUES, FieldKind, FieldSpec)
from utilities.constants.response_messages import (
    ERROR_INTEGER_TOO_SMALL, ERROR_INVALID_BOOLEAN, ERROR_INVALID_DATE,
    ERROR_INVALID_DATE_RANGE, ERROR_INVALID_INTEGER, ERROR_STRING_TOO_LONG,
    ERROR_STRING_TOO_SHORT, ERROR_UNSUPPORTED_FIELD_KIND)


def validate_integer(raw_value: str, min_value: Optional[int] = None) -> int:
    """
    Parse a whole number.

    Args:
        raw_value (str): The line read from the operator.
        min_value (Optional[int]): Smallest accepted value, if any.

    Returns:
        int: The parsed value.

    Raises:
        ValueError: If the input is not an integer or is below `min_value`.
    """
    try:
        value = int(raw_value.strip())
    except ValueError:
        raise ValueError(ERROR_INVALID_INTEGER)

    if min_value is not None and value < min_value:
        raise ValueError(ERROR_INTEGER_TOO_SMALL.format(minimum=min_value))
    return value


def validate_bounded_string(raw_value: str, min_length: int = 0, max_length: Optional[int] = None) -> str:
    """
    Check the length of a string against its column bounds.

    Raises:
        ValueError: If the value is shorter than `min_length` or longer than `max_length`.
    """
    if len(raw_value) < min_length:
        raise ValueError(ERROR_STRING_TOO_SHORT.format(min_length=min_length))
    if max_length is not None and len(raw_value) > max_length:
        raise ValueError(ERROR_STRING_TOO_LONG.format(max_length=max_length))
    return raw_value


def validate_date(raw_value: str) -> str:
    """
    Check that the value is an ISO date and return it in canonical form.

    Raises:
        ValueError: If the value does not parse as YYYY-MM-DD.
    """
    value = raw_value.strip()
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(ERROR_INVALID_DATE.format(value=value))
    return parsed.strftime(DATE_FORMAT)


def validate_boolean(raw_value: str) -> bool:
    value = raw_value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(ERROR_INVALID_BOOLEAN)


def validate_date_range(start_date: str, end_date: str):
    """
    Validate that a date range is not inverted.

    Both dates are expected in the canonical form returned by `validate_date`.

    Raises:
        ValueError: If `start_date` falls after `end_date`.
    """
    start = date.fromisoformat(start_date)
    end = date.fromisoformat(end_date)
    if start > end:
        raise ValueError(ERROR_INVALID_DATE_RANGE.format(start=start_date, end=end_date))


def validate_field(field: FieldSpec, raw_value: str):
    """Validate a raw input line against the field's kind and constraints."""
    if field.kind == FieldKind.INTEGER:
        return validate_integer(raw_value, field.min_value)
    if field.kind == FieldKind.BOUNDED_STRING:
        return validate_bounded_string(raw_value, field.min_length, field.max_length)
    if field.kind == FieldKind.DATE:
        return validate_date(raw_value)
    if field.kind == FieldKind.BOOLEAN:
        return validate_boolean(raw_value)
    raise ValueError(ERROR_UNSUPPORTED_FIELD_KIND.format(kind=field.kind))
