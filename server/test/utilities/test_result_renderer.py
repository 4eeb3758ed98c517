from utilities.connections.gateway import QueryResult
from utilities.constants.response_messages import \
    SUMMARY_ROW_COUNT_CAPITALIZED
from utilities.result_renderer import format_line, render_result


def test_header_rows_and_summary():
    result = QueryResult(columns=["repairType", "hotelID", "roomNo"], rows=[("plumbing", 1, 101)])

    assert render_result(result) == [
        "repairType\thotelID\troomNo",
        "plumbing\t1\t101",
        "total row(s): 1",
    ]


def test_empty_result_still_prints_header():
    result = QueryResult(columns=["booked_rooms"])

    assert render_result(result, SUMMARY_ROW_COUNT_CAPITALIZED) == ["booked_rooms", "Total row(s): 0"]


def test_null_values_are_shown_as_null():
    assert format_line([1, None, "x"]) == "1\tnull\tx"
