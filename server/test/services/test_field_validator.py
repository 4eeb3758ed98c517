import pytest

from services.validators.field_validator import (validate_boolean,
                                                 validate_bounded_string,
                                                 validate_date,
                                                 validate_date_range,
                                                 validate_field,
                                                 validate_integer)
from utilities.constants.field_enums import FieldKind, FieldSpec
from utilities.constants.response_messages import (ERROR_INVALID_DATE_RANGE,
                                                   ERROR_INVALID_INTEGER,
                                                   ERROR_STRING_TOO_LONG)


@pytest.mark.parametrize("length, accepted", [(0, False), (1, True), (10, True), (11, False)])
def test_bounded_string_length_window(length, accepted):
    value = "x" * length
    if accepted:
        assert validate_bounded_string(value, min_length=1, max_length=10) == value
    else:
        with pytest.raises(ValueError):
            validate_bounded_string(value, min_length=1, max_length=10)


def test_bounded_string_without_maximum():
    assert validate_bounded_string("y" * 500) == "y" * 500


def test_too_long_message_names_the_limit():
    with pytest.raises(ValueError) as excinfo:
        validate_bounded_string("x" * 31, min_length=1, max_length=30)

    assert str(excinfo.value) == ERROR_STRING_TOO_LONG.format(max_length=30)


@pytest.mark.parametrize("raw_value", ["", " ", "ten", "1e3", "0x10", "3.0"])
def test_integer_rejects_non_numeric(raw_value):
    with pytest.raises(ValueError) as excinfo:
        validate_integer(raw_value)

    assert str(excinfo.value) == ERROR_INVALID_INTEGER


def test_date_is_returned_in_canonical_form():
    assert validate_date(" 2023-1-5 ") == "2023-01-05"


def test_boolean_is_case_insensitive():
    assert validate_boolean("True") is True
    assert validate_boolean(" NO ") is False


def test_inverted_date_range_is_rejected():
    with pytest.raises(ValueError) as excinfo:
        validate_date_range("2024-03-02", "2024-03-01")

    assert str(excinfo.value) == ERROR_INVALID_DATE_RANGE.format(start="2024-03-02", end="2024-03-01")


def test_single_day_range_is_accepted():
    validate_date_range("2024-03-01", "2024-03-01")


def test_validate_field_dispatches_on_kind():
    field = FieldSpec(key="hotel_id", label="Hotel ID", kind=FieldKind.INTEGER)

    assert validate_field(field, "12") == 12
