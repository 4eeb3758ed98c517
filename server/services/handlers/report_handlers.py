"""Handlers for the counting and listing menu entries."""

from datetime import date, timedelta
from typing import Any, Dict

from services.handlers.base_handler import ReportHandler
from services.validators.field_validator import validate_date_range
from utilities.constants.field_enums import (DATE_FORMAT, date_field,
                                             integer_field, string_field)
from utilities.constants.response_messages import \
    SUMMARY_ROW_COUNT_CAPITALIZED
from utilities.constants.sql_statements import (
    COUNT_AVAILABLE_ROOMS_SQL, COUNT_BOOKED_ROOMS_SQL,
    CUSTOMER_TOTAL_COST_SQL, DEFAULT_YEAR_EXPRESSION,
    LIST_REPAIRS_BY_COMPANY_SQL, LIST_WEEKLY_BOOKINGS_SQL,
    REPAIRS_PER_YEAR_SQL, TOP_K_CUSTOMER_BOOKINGS_SQL,
    TOP_K_MAINTENANCE_COMPANIES_SQL, TOP_K_ROOM_PRICES_SQL, YEAR_EXPRESSIONS)

COMPANY_NAME_MAX_LENGTH = 30
CUSTOMER_NAME_MAX_LENGTH = 30
DAYS_IN_WEEK = 7


def top_k_field():
    return integer_field("k", "K", min_value=1)


class DateRangeMixin:
    """Rejects ranges whose start date falls after the end date."""

    def check_values(self, values: Dict[str, Any]):
        validate_date_range(values["start_date"], values["end_date"])


class AvailableRoomsHandler(ReportHandler):
    """Rooms of a hotel that no booking for that hotel refers to."""

    fields = [integer_field("hotel_id", "Hotel ID")]
    statement = COUNT_AVAILABLE_ROOMS_SQL


class BookedRoomsHandler(ReportHandler):
    """Booking rows for a hotel; a room booked several times counts each time."""

    fields = [integer_field("hotel_id", "Hotel ID")]
    statement = COUNT_BOOKED_ROOMS_SQL
    summary_template = SUMMARY_ROW_COUNT_CAPITALIZED


class WeeklyBookingsHandler(ReportHandler):
    """Bookings of a hotel over the seven days starting at the given date."""

    fields = [
        integer_field("hotel_id", "Hotel ID"),
        date_field("start_date", "Start Date"),
    ]
    statement = LIST_WEEKLY_BOOKINGS_SQL

    def build_params(self, values: Dict[str, Any]) -> Dict[str, Any]:
        start = date.fromisoformat(values["start_date"])
        end = start + timedelta(days=DAYS_IN_WEEK - 1)
        return {
            "hotel_id": values["hotel_id"],
            "start_date": values["start_date"],
            "end_date": end.strftime(DATE_FORMAT),
        }


class TopKRoomPricesHandler(DateRangeMixin, ReportHandler):
    fields = [
        date_field("start_date", "Start Date"),
        date_field("end_date", "End Date"),
        top_k_field(),
    ]
    statement = TOP_K_ROOM_PRICES_SQL


class TopKCustomerBookingsHandler(ReportHandler):
    fields = [
        string_field("first_name", "Customer First Name", min_length=1, max_length=CUSTOMER_NAME_MAX_LENGTH),
        string_field("last_name", "Customer Last Name", min_length=1, max_length=CUSTOMER_NAME_MAX_LENGTH),
        top_k_field(),
    ]
    statement = TOP_K_CUSTOMER_BOOKINGS_SQL


class CustomerTotalCostHandler(DateRangeMixin, ReportHandler):
    fields = [
        integer_field("hotel_id", "Hotel ID"),
        string_field("first_name", "Customer First Name", min_length=1, max_length=CUSTOMER_NAME_MAX_LENGTH),
        string_field("last_name", "Customer Last Name", min_length=1, max_length=CUSTOMER_NAME_MAX_LENGTH),
        date_field("start_date", "Start Date"),
        date_field("end_date", "End Date"),
    ]
    statement = CUSTOMER_TOTAL_COST_SQL
    summary_template = SUMMARY_ROW_COUNT_CAPITALIZED


class RepairsByCompanyHandler(ReportHandler):
    fields = [
        string_field("company_name", "Maintenance Company Name", min_length=1, max_length=COMPANY_NAME_MAX_LENGTH),
    ]
    statement = LIST_REPAIRS_BY_COMPANY_SQL


class TopKMaintenanceCompaniesHandler(ReportHandler):
    fields = [top_k_field()]
    statement = TOP_K_MAINTENANCE_COMPANIES_SQL


class RepairsPerYearHandler(ReportHandler):
    fields = [
        integer_field("hotel_id", "Hotel ID"),
        integer_field("room_no", "Room Number"),
    ]

    def build_statement(self, values: Dict[str, Any]) -> str:
        year_expression = YEAR_EXPRESSIONS.get(self.gateway.dialect_name, DEFAULT_YEAR_EXPRESSION)
        return REPAIRS_PER_YEAR_SQL.format(year_expression=year_expression)
