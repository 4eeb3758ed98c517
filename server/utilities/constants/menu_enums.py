from enum import Enum


class MenuChoice(Enum):
    ADD_CUSTOMER = 1
    ADD_ROOM = 2
    ADD_MAINTENANCE_COMPANY = 3
    ADD_REPAIR = 4
    BOOK_ROOM = 5
    ASSIGN_HOUSE_CLEANING = 6
    REPAIR_REQUEST = 7
    AVAILABLE_ROOMS = 8
    BOOKED_ROOMS = 9
    WEEKLY_BOOKINGS = 10
    TOP_K_ROOM_PRICES = 11
    TOP_K_CUSTOMER_BOOKINGS = 12
    CUSTOMER_TOTAL_COST = 13
    REPAIRS_BY_COMPANY = 14
    TOP_K_MAINTENANCE_COMPANIES = 15
    REPAIRS_PER_YEAR = 16
    EXIT = 17


class DispatcherState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


MENU_TITLE = "MAIN MENU"
MENU_UNDERLINE = "---------"

# Rendered in declaration order
MENU_LABELS = {
    MenuChoice.ADD_CUSTOMER: "Add new customer",
    MenuChoice.ADD_ROOM: "Add new room",
    MenuChoice.ADD_MAINTENANCE_COMPANY: "Add new maintenance company",
    MenuChoice.ADD_REPAIR: "Add new repair",
    MenuChoice.BOOK_ROOM: "Add new Booking",
    MenuChoice.ASSIGN_HOUSE_CLEANING: "Assign house cleaning staff to a room",
    MenuChoice.REPAIR_REQUEST: "Raise a repair request",
    MenuChoice.AVAILABLE_ROOMS: "Get number of available rooms",
    MenuChoice.BOOKED_ROOMS: "Get number of booked rooms",
    MenuChoice.WEEKLY_BOOKINGS: "Get hotel bookings for a week",
    MenuChoice.TOP_K_ROOM_PRICES: "Get top k rooms with highest price for a date range",
    MenuChoice.TOP_K_CUSTOMER_BOOKINGS: "Get top k highest booking price for a customer",
    MenuChoice.CUSTOMER_TOTAL_COST: "Get customer total cost occurred for a give date range",
    MenuChoice.REPAIRS_BY_COMPANY: "List the repairs made by maintenance company",
    MenuChoice.TOP_K_MAINTENANCE_COMPANIES: "Get top k maintenance companies based on repair count",
    MenuChoice.REPAIRS_PER_YEAR: "Get number of repairs occurred per year for a given hotel room",
    MenuChoice.EXIT: "< EXIT",
}
