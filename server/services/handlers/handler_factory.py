"""
Module providing HandlerFactory, which maps menu choices to operation handlers.

Every menu choice except EXIT must have a handler; the mapping is checked
once when the dispatcher is built.
"""

from typing import Dict, Type

from app.console import Console
from services.handlers.base_handler import Handler
from services.handlers.report_handlers import (
    AvailableRoomsHandler, BookedRoomsHandler, CustomerTotalCostHandler,
    RepairsByCompanyHandler, RepairsPerYearHandler,
    TopKCustomerBookingsHandler, TopKMaintenanceCompaniesHandler,
    TopKRoomPricesHandler, WeeklyBookingsHandler)
from services.handlers.write_handlers import (AddCustomerHandler,
                                              AddMaintenanceCompanyHandler,
                                              AddRepairHandler, AddRoomHandler,
                                              AssignHouseCleaningHandler,
                                              BookRoomHandler,
                                              RepairRequestHandler)
from utilities.connections.gateway import DatabaseGateway
from utilities.constants.menu_enums import MenuChoice
from utilities.constants.response_messages import ERROR_MISSING_HANDLER

HANDLER_MAP: Dict[MenuChoice, Type[Handler]] = {
    MenuChoice.ADD_CUSTOMER: AddCustomerHandler,
    MenuChoice.ADD_ROOM: AddRoomHandler,
    MenuChoice.ADD_MAINTENANCE_COMPANY: AddMaintenanceCompanyHandler,
    MenuChoice.ADD_REPAIR: AddRepairHandler,
    MenuChoice.BOOK_ROOM: BookRoomHandler,
    MenuChoice.ASSIGN_HOUSE_CLEANING: AssignHouseCleaningHandler,
    MenuChoice.REPAIR_REQUEST: RepairRequestHandler,
    MenuChoice.AVAILABLE_ROOMS: AvailableRoomsHandler,
    MenuChoice.BOOKED_ROOMS: BookedRoomsHandler,
    MenuChoice.WEEKLY_BOOKINGS: WeeklyBookingsHandler,
    MenuChoice.TOP_K_ROOM_PRICES: TopKRoomPricesHandler,
    MenuChoice.TOP_K_CUSTOMER_BOOKINGS: TopKCustomerBookingsHandler,
    MenuChoice.CUSTOMER_TOTAL_COST: CustomerTotalCostHandler,
    MenuChoice.REPAIRS_BY_COMPANY: RepairsByCompanyHandler,
    MenuChoice.TOP_K_MAINTENANCE_COMPANIES: TopKMaintenanceCompaniesHandler,
    MenuChoice.REPAIRS_PER_YEAR: RepairsPerYearHandler,
}


class HandlerFactory:
    """
    Factory class to build the handlers for every menu choice.

    Methods:
        validate_handler_map: Check that each non-exit choice has a handler.
        get_handlers: Instantiate one handler per menu choice.
    """

    @staticmethod
    def validate_handler_map(handler_map: Dict[MenuChoice, Type[Handler]]):
        """
        Raises:
            ValueError: If a menu choice other than EXIT has no handler.
        """
        for choice in MenuChoice:
            if choice != MenuChoice.EXIT and choice not in handler_map:
                raise ValueError(ERROR_MISSING_HANDLER.format(choice=choice.value))

    @staticmethod
    def get_handlers(
        gateway: DatabaseGateway,
        console: Console,
        handler_map: Dict[MenuChoice, Type[Handler]] = HANDLER_MAP,
    ) -> Dict[MenuChoice, Handler]:
        """
        Return a handler instance for every menu choice.

        Args:
            gateway (DatabaseGateway): Shared by every handler.
            console (Console): Operator input and output.
            handler_map: Choice to handler class mapping.

        Raises:
            ValueError: If the mapping is incomplete.
        """
        HandlerFactory.validate_handler_map(handler_map)
        return {choice: handler_class(gateway, console) for choice, handler_class in handler_map.items()}
