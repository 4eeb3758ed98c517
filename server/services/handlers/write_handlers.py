"""Handlers for the menu entries that add or change rows."""

from typing import Any, Dict

from services.handlers.base_handler import WriteHandler
from utilities.connections.gateway import GatewayError
from utilities.constants.field_enums import (boolean_field, date_field,
                                             integer_field, string_field)
from utilities.constants.response_messages import (
    ERROR_ASSIGNMENT_NOT_FOUND, ERROR_HOTEL_NOT_FOUND, SUCCESS_BOOKING_ADDED,
    SUCCESS_COMPANY_ADDED, SUCCESS_CUSTOMER_ADDED, SUCCESS_REPAIR_ADDED,
    SUCCESS_REQUEST_ADDED, SUCCESS_ROOM_ADDED, SUCCESS_STAFF_ASSIGNED)
from utilities.constants.sql_statements import (
    INSERT_BOOKING_SQL, INSERT_CUSTOMER_SQL, INSERT_MAINTENANCE_COMPANY_SQL,
    INSERT_REPAIR_SQL, INSERT_REQUEST_SQL, INSERT_ROOM_SQL,
    SELECT_HOTEL_MANAGER_SQL, SELECT_MAX_REQUEST_ID_SQL,
    UPDATE_ASSIGNED_ROOM_SQL)
from utilities.logging_utils import setup_logger

logger = setup_logger(__name__)

NAME_MAX_LENGTH = 30
SHORT_TEXT_MAX_LENGTH = 10


class AddCustomerHandler(WriteHandler):
    fields = [
        integer_field("customer_id", "Customer ID"),
        string_field("first_name", "First Name", min_length=1, max_length=NAME_MAX_LENGTH),
        string_field("last_name", "Last Name", min_length=1, max_length=NAME_MAX_LENGTH),
        string_field("address", "Address"),
        string_field("phone", "Phone #"),
        date_field("dob", "Date of Birth"),
        string_field("gender", "Gender"),
    ]
    statement = INSERT_CUSTOMER_SQL
    success_message = SUCCESS_CUSTOMER_ADDED


class AddRoomHandler(WriteHandler):
    fields = [
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
        string_field("room_type", "Room Type", min_length=1, max_length=SHORT_TEXT_MAX_LENGTH),
    ]
    statement = INSERT_ROOM_SQL
    success_message = SUCCESS_ROOM_ADDED


class AddMaintenanceCompanyHandler(WriteHandler):
    fields = [
        integer_field("company_id", "Company ID"),
        string_field("name", "Name", min_length=1, max_length=SHORT_TEXT_MAX_LENGTH),
        string_field("address", "Address"),
        boolean_field("is_certified", "Is the company certified?"),
    ]
    statement = INSERT_MAINTENANCE_COMPANY_SQL
    success_message = SUCCESS_COMPANY_ADDED


class AddRepairHandler(WriteHandler):
    fields = [
        integer_field("repair_id", "Repair ID"),
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
        integer_field("company_id", "Company ID"),
        date_field("repair_date", "Repair Date"),
        string_field("description", "Description of repair"),
        string_field("repair_type", "Repair Type", min_length=1, max_length=SHORT_TEXT_MAX_LENGTH),
    ]
    statement = INSERT_REPAIR_SQL
    success_message = SUCCESS_REPAIR_ADDED


class BookRoomHandler(WriteHandler):
    fields = [
        integer_field("booking_id", "Booking ID"),
        integer_field("customer_id", "Customer ID"),
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
        date_field("booking_date", "Booking Date"),
        integer_field("num_people", "Number of People"),
        integer_field("price", "Price"),
    ]
    statement = INSERT_BOOKING_SQL
    success_message = SUCCESS_BOOKING_ADDED


class AssignHouseCleaningHandler(WriteHandler):
    """Move a cleaning staff member's assignment to another room of the same hotel."""

    fields = [
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
        integer_field("staff_id", "Staff ID"),
    ]
    statement = UPDATE_ASSIGNED_ROOM_SQL
    success_message = SUCCESS_STAFF_ASSIGNED

    def execute(self, values: Dict[str, Any]) -> bool:
        params = self.build_params(values)
        try:
            updated = self.gateway.execute_update(self.statement, params)
        except GatewayError as e:
            self.report_error(e)
            return False
        if updated == 0:
            self.console.error(ERROR_ASSIGNMENT_NOT_FOUND.format(**params))
            return False
        self.console.write(self.success_message.format(**params))
        return True


class RepairRequestHandler(WriteHandler):
    """
    Raise a repair request on behalf of a hotel's manager.

    The manager is looked up from the hotel and the request id is one more
    than the current maximum. The two reads and the insert are separate
    statements, so concurrent sessions can compute the same id; the insert
    then fails on the primary key and the error is reported.
    """

    fields = [
        integer_field("hotel_id", "Hotel ID"),
        integer_field("staff_ssn", "Staff SSN"),
        integer_field("room_no", "Room Number"),
        integer_field("repair_id", "Repair ID"),
        date_field("request_date", "Request Date"),
        string_field("description", "Repair Request Description"),
    ]
    statement = INSERT_REQUEST_SQL
    success_message = SUCCESS_REQUEST_ADDED

    def next_request_id(self) -> int:
        max_request_id = self.gateway.execute_query(SELECT_MAX_REQUEST_ID_SQL).scalar()
        return (max_request_id or 0) + 1

    def execute(self, values: Dict[str, Any]) -> bool:
        logger.info(
            "Repair request from staff %s for hotel %s room %s",
            values["staff_ssn"], values["hotel_id"], values["room_no"],
        )
        try:
            manager = self.gateway.execute_query(SELECT_HOTEL_MANAGER_SQL, {"hotel_id": values["hotel_id"]})
            if manager.row_count == 0:
                self.console.error(ERROR_HOTEL_NOT_FOUND.format(hotel_id=values["hotel_id"]))
                return False
            request_id = self.next_request_id()
        except GatewayError as e:
            self.report_error(e)
            return False

        return super().execute({
            "request_id": request_id,
            "manager_id": manager.scalar(),
            "repair_id": values["repair_id"],
            "request_date": values["request_date"],
            "description": values["description"],
        })
