from typing import Any, Iterable, List

from utilities.connections.gateway import QueryResult
from utilities.constants.response_messages import SUMMARY_ROW_COUNT

COLUMN_DELIMITER = "\t"
NULL_DISPLAY = "null"


def format_value(value: Any) -> str:
    if value is None:
        return NULL_DISPLAY
    return str(value)


def format_line(values: Iterable[Any]) -> str:
    return COLUMN_DELIMITER.join(format_value(value) for value in values)


def render_result(result: QueryResult, summary_template: str = SUMMARY_ROW_COUNT) -> List[str]:
    """
    Render a query result as console lines.

    The first line holds the column names, followed by one line per row and a
    summary line with the row count.
    """
    lines = [format_line(result.columns)]
    lines.extend(format_line(row) for row in result.rows)
    lines.append(summary_template.format(row_count=result.row_count))
    return lines
