import pytest

from app.input_loop import prompt_and_validate, prompt_fields
from utilities.constants.field_enums import (boolean_field, date_field,
                                             integer_field, string_field)
from utilities.constants.response_messages import (ERROR_INVALID_INTEGER,
                                                   ERROR_STRING_TOO_LONG,
                                                   ERROR_STRING_TOO_SHORT)

FIRST_NAME = string_field("first_name", "First Name", min_length=1, max_length=30)


class TestPromptAndValidate:

    def test_rejects_over_length_string_then_accepts_valid(self, console_factory):
        console = console_factory("a" * 31, "b" * 30)

        value = prompt_and_validate(console, FIRST_NAME)

        assert value == "b" * 30
        assert ERROR_STRING_TOO_LONG.format(max_length=30) in console.stderr.getvalue()
        assert console.stdout.getvalue().count("First Name: ") == 2

    def test_rejects_empty_line_for_required_string(self, console_factory):
        console = console_factory("", "Ada")

        assert prompt_and_validate(console, FIRST_NAME) == "Ada"
        assert ERROR_STRING_TOO_SHORT.format(min_length=1) in console.stderr.getvalue()

    def test_unbounded_string_accepts_empty_line(self, console_factory):
        console = console_factory("")

        assert prompt_and_validate(console, string_field("address", "Address")) == ""
        assert console.stderr.getvalue() == ""

    def test_integer_reprompts_until_numeric(self, console_factory):
        console = console_factory("abc", "", "4.5", "42")

        assert prompt_and_validate(console, integer_field("hotel_id", "Hotel ID")) == 42
        assert console.stderr.getvalue().count(ERROR_INVALID_INTEGER) == 3

    def test_integer_accepts_surrounding_whitespace_and_sign(self, console_factory):
        console = console_factory("  -7 ")

        assert prompt_and_validate(console, integer_field("room_no", "Room Number")) == -7

    def test_integer_minimum_is_enforced(self, console_factory):
        console = console_factory("0", "3")

        assert prompt_and_validate(console, integer_field("k", "K", min_value=1)) == 3
        assert "at least 1" in console.stderr.getvalue()

    def test_date_is_validated_and_normalized(self, console_factory):
        console = console_factory("2024-02-30", "yesterday", "2024-02-09")

        assert prompt_and_validate(console, date_field("dob", "Date of Birth")) == "2024-02-09"
        assert console.stderr.getvalue().count("YYYY-MM-DD") == 2

    @pytest.mark.parametrize("raw_value, expected", [("TRUE", True), ("false", False), ("y", True), ("0", False)])
    def test_boolean_values(self, console_factory, raw_value, expected):
        console = console_factory(raw_value)

        assert prompt_and_validate(console, boolean_field("is_certified", "Certified")) is expected

    def test_boolean_rejects_other_words(self, console_factory):
        console = console_factory("maybe", "true")

        assert prompt_and_validate(console, boolean_field("is_certified", "Certified")) is True
        assert "TRUE or FALSE" in console.stderr.getvalue()

    def test_end_of_input_raises_eof(self, console_factory):
        console = console_factory("not a number")

        with pytest.raises(EOFError):
            prompt_and_validate(console, integer_field("hotel_id", "Hotel ID"))


def test_prompt_fields_collects_in_declared_order(console_factory):
    console = console_factory("1", "101", "Suite")
    fields = [
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
        string_field("room_type", "Room Type", min_length=1, max_length=10),
    ]

    values = prompt_fields(console, fields)

    assert values == {"hotel_id": 1, "room_no": 101, "room_type": "Suite"}
    assert console.stdout.getvalue() == "Hotel ID: Room Number: Room Type: "
