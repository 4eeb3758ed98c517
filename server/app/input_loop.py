from typing import Any, Dict, Iterable

from app.console import Console
from services.validators.field_validator import validate_field
from utilities.constants.field_enums import FieldSpec
from utilities.logging_utils import setup_logger

logger = setup_logger(__name__)


def prompt_and_validate(console: Console, field: FieldSpec) -> Any:
    """
    Prompt for a field until the operator enters a valid value.

    Validation failures are printed and the prompt repeats, so the caller
    always receives a value that satisfies the field's constraints.

    Args:
        console (Console): Where the prompt is written and the line is read.
        field (FieldSpec): The field's label, kind and bounds.

    Returns:
        The validated value: int, str or bool depending on the field kind.

    Raises:
        EOFError: If the input stream ends before a valid value is read.
    """
    while True:
        raw_value = console.read_line(field.prompt)
        try:
            return validate_field(field, raw_value)
        except ValueError as e:
            logger.debug("Rejected input for %s: %s", field.key, e)
            console.error(str(e))


def prompt_fields(console: Console, fields: Iterable[FieldSpec]) -> Dict[str, Any]:
    """Collect every field in declared order, keyed by `FieldSpec.key`."""
    return {field.key: prompt_and_validate(console, field) for field in fields}
