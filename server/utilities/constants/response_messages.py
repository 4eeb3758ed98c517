# ERROR MESSAGES

# Input validation Errors
ERROR_INVALID_INTEGER = "Your input is invalid! Expected a whole number."
ERROR_STRING_TOO_SHORT = "Invalid input: input must be at least {min_length} character(s)..."
ERROR_STRING_TOO_LONG = "Invalid input: input exceeds {max_length} characters..."
ERROR_INVALID_DATE = "Invalid input: '{value}' is not a date in YYYY-MM-DD format..."
ERROR_INVALID_BOOLEAN = "Invalid input: expected TRUE or FALSE..."
ERROR_INTEGER_TOO_SMALL = "Invalid input: value must be at least {minimum}..."
ERROR_UNSUPPORTED_FIELD_KIND = "Unsupported field kind: {kind}"
ERROR_INVALID_DATE_RANGE = "Invalid date range: start date {start} is after end date {end}."

# Database related Errors
ERROR_DATABASE_STATEMENT_FAILURE = "Database statement error: {error}"
ERROR_DATABASE_CONNECTION_FAILURE = "Error - Unable to Connect to Database: {error}"
ERROR_DATABASE_CONNECTION_HINT = "Make sure you started postgres on this machine"
ERROR_DATABASE_CLOSE_FAILURE = "Error closing the database connection: {error}"
ERROR_SQL_QUERY_REQUIRED = "Query parameter is required"
ERROR_GATEWAY_CLOSED = "The database connection has already been closed."

# Dispatcher Errors
ERROR_UNRECOGNIZED_CHOICE = "Unrecognized choice!"
ERROR_MISSING_HANDLER = "No handler registered for menu choice {choice}."

# Handler Errors
ERROR_HOTEL_NOT_FOUND = "No hotel found with ID {hotel_id}."
ERROR_ASSIGNMENT_NOT_FOUND = "No assignment found for staff {staff_id} at hotel {hotel_id}."

# SUCCESS MESSAGES
SUCCESS_CUSTOMER_ADDED = "Customer {customer_id} added."
SUCCESS_ROOM_ADDED = "Room {room_no} added to hotel {hotel_id}."
SUCCESS_COMPANY_ADDED = "Maintenance company {company_id} added."
SUCCESS_REPAIR_ADDED = "Repair {repair_id} added."
SUCCESS_BOOKING_ADDED = "Booking {booking_id} added."
SUCCESS_STAFF_ASSIGNED = "Staff {staff_id} assigned to room {room_no} at hotel {hotel_id}."
SUCCESS_REQUEST_ADDED = "Repair request {request_id} raised with manager {manager_id}."

# INFO MESSAGES
INFO_CONNECTING = "Connecting to database..."
INFO_CONNECTION_URL = "Connection URL: {url}\n"
INFO_CONNECTED = "Done"
INFO_DISCONNECTING = "Disconnecting from database..."
INFO_DISCONNECTED = "Done\n\nBye !"
INFO_CHOICE_PROMPT = "Please make your choice: "

# Report summary lines
SUMMARY_ROW_COUNT = "total row(s): {row_count}"
SUMMARY_ROW_COUNT_CAPITALIZED = "Total row(s): {row_count}"

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface                          \n"
    "*******************************************************\n"
)
