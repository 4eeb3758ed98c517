"""
Abstract base handlers for menu operations.

Every menu entry is a Handler: it prompts for a fixed, ordered list of fields,
builds one parameterized statement from the validated values, runs it through
the DatabaseGateway and reports the outcome on the console. Statement errors
are printed and swallowed at this level so that a failed operation never ends
the menu loop.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.console import Console
from app.input_loop import prompt_fields
from utilities.connections.gateway import (DatabaseGateway, GatewayError,
                                           QueryResult)
from utilities.constants.field_enums import FieldSpec
from utilities.constants.response_messages import SUMMARY_ROW_COUNT
from utilities.logging_utils import setup_logger
from utilities.result_renderer import render_result

logger = setup_logger(__name__)


class Handler(ABC):
    """
    Base class for one menu-triggered operation.

    Subclasses declare `fields` and implement `execute`.
    """

    fields: List[FieldSpec] = []

    def __init__(self, gateway: DatabaseGateway, console: Console):
        """
        Args:
            gateway (DatabaseGateway): The connection statements are executed on.
            console (Console): Operator input and output.
        """
        self.gateway = gateway
        self.console = console

    def run(self):
        """Collect the handler's fields from the operator, then execute."""
        values = prompt_fields(self.console, self.fields)
        return self.execute(values)

    @abstractmethod
    def execute(self, values: Dict[str, Any]):
        """Build and run the handler's statement from already validated values."""

    def build_params(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return dict(values)

    def report_error(self, error: Exception):
        logger.info("%s failed: %s", type(self).__name__, error)
        self.console.error(str(error))


class WriteHandler(Handler):
    """
    Handler that runs a single INSERT or UPDATE.

    `statement` is the SQL text and `success_message` is formatted with the
    bound parameters once the statement commits.
    """

    statement: str = ""
    success_message: str = ""

    def execute(self, values: Dict[str, Any]) -> bool:
        params = self.build_params(values)
        try:
            self.gateway.execute_update(self.statement, params)
        except GatewayError as e:
            self.report_error(e)
            return False
        self.console.write(self.success_message.format(**params))
        return True


class ReportHandler(Handler):
    """
    Handler that runs a single SELECT and prints the result table.

    Returns the QueryResult, or None when the statement failed or the
    validated values were rejected by `check_values`.
    """

    statement: str = ""
    summary_template: str = SUMMARY_ROW_COUNT

    def build_statement(self, values: Dict[str, Any]) -> str:
        return self.statement

    def check_values(self, values: Dict[str, Any]):
        """Cross-field checks; raise ValueError to abort before querying."""

    def execute(self, values: Dict[str, Any]) -> Optional[QueryResult]:
        try:
            self.check_values(values)
        except ValueError as e:
            self.report_error(e)
            return None

        try:
            result = self.gateway.execute_query(self.build_statement(values), self.build_params(values))
        except GatewayError as e:
            self.report_error(e)
            return None

        for line in render_result(result, self.summary_template):
            self.console.write(line)
        return result
