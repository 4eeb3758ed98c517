from typing import Dict, Optional

from app.console import Console
from services.handlers.base_handler import Handler
from services.handlers.handler_factory import HandlerFactory
from services.validators.field_validator import validate_integer
from utilities.connections.common import close_connection
from utilities.connections.gateway import DatabaseGateway
from utilities.constants.menu_enums import (MENU_LABELS, MENU_TITLE,
                                            MENU_UNDERLINE, DispatcherState,
                                            MenuChoice)
from utilities.constants.response_messages import (ERROR_UNRECOGNIZED_CHOICE,
                                                   INFO_CHOICE_PROMPT,
                                                   INFO_DISCONNECTED,
                                                   INFO_DISCONNECTING)
from utilities.logging_utils import setup_logger

logger = setup_logger(__name__)


class MenuDispatcher:
    """
    Runs the main menu loop.

    The dispatcher is RUNNING until the EXIT choice moves it to TERMINATED.
    The gateway is closed once when the loop ends, whichever way it ends.
    """

    def __init__(
        self,
        gateway: DatabaseGateway,
        console: Console,
        handlers: Optional[Dict[MenuChoice, Handler]] = None,
    ):
        self.gateway = gateway
        self.console = console
        if handlers is None:
            handlers = HandlerFactory.get_handlers(gateway, console)
        else:
            HandlerFactory.validate_handler_map(handlers)
        self.handlers = handlers
        self.state = DispatcherState.RUNNING

    def render_menu(self):
        self.console.write(MENU_TITLE)
        self.console.write(MENU_UNDERLINE)
        for choice, label in MENU_LABELS.items():
            self.console.write(f"{choice.value}. {label}")

    def read_choice(self) -> int:
        """Read a menu selection, re-prompting until a whole number is entered."""
        while True:
            raw_choice = self.console.read_line(INFO_CHOICE_PROMPT)
            try:
                return validate_integer(raw_choice)
            except ValueError as e:
                self.console.error(str(e))

    def dispatch(self, code: int):
        """Run the handler for a menu code, or switch to TERMINATED on EXIT."""
        try:
            choice = MenuChoice(code)
        except ValueError:
            self.console.write(ERROR_UNRECOGNIZED_CHOICE)
            return

        logger.info("Menu choice %s (%s)", choice.value, choice.name)
        if choice == MenuChoice.EXIT:
            self.state = DispatcherState.TERMINATED
            return
        self.handlers[choice].run()

    def run(self):
        try:
            while self.state == DispatcherState.RUNNING:
                self.render_menu()
                self.dispatch(self.read_choice())
        finally:
            self.console.write(INFO_DISCONNECTING)
            close_connection(self.gateway)
            self.console.write(INFO_DISCONNECTED)
