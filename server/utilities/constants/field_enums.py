from dataclasses import dataclass
from enum import Enum
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"

TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0"}


class FieldKind(Enum):
    INTEGER = "integer"
    BOUNDED_STRING = "bounded_string"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSpec:
    """
    A single operator prompt.

    `min_length`/`max_length` bound BOUNDED_STRING input; for INTEGER fields
    `min_value` is the smallest accepted number.
    """
    key: str
    label: str
    kind: FieldKind = FieldKind.BOUNDED_STRING
    min_length: int = 0
    max_length: Optional[int] = None
    min_value: Optional[int] = None

    @property
    def prompt(self) -> str:
        return f"{self.label}: "


def integer_field(key: str, label: str, min_value: Optional[int] = None) -> FieldSpec:
    return FieldSpec(key=key, label=label, kind=FieldKind.INTEGER, min_value=min_value)


def string_field(key: str, label: str, min_length: int = 0, max_length: Optional[int] = None) -> FieldSpec:
    return FieldSpec(
        key=key,
        label=label,
        kind=FieldKind.BOUNDED_STRING,
        min_length=min_length,
        max_length=max_length,
    )


def date_field(key: str, label: str) -> FieldSpec:
    return FieldSpec(key=key, label=f"{label} (YYYY-MM-DD)", kind=FieldKind.DATE)


def boolean_field(key: str, label: str) -> FieldSpec:
    return FieldSpec(key=key, label=f"{label} (TRUE/FALSE)", kind=FieldKind.BOOLEAN)
