import argparse
import sys
from typing import List, Optional

from app.console import Console
from app.dispatcher import MenuDispatcher
from utilities.connection_config import ConnectionConfig
from utilities.connections.gateway import (DatabaseGateway,
                                           GatewayConnectionError)
from utilities.constants.response_messages import (
    ERROR_DATABASE_CONNECTION_HINT, GREETING, INFO_CONNECTED, INFO_CONNECTING,
    INFO_CONNECTION_URL)
from utilities.logging_utils import setup_logger

logger = setup_logger(__name__)

EXIT_CONNECTION_FAILURE = 1
EXIT_UNEXPECTED_ERROR = 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hotel-dbms",
        description="Interactive console for the hotel management database.",
    )
    parser.add_argument("dbname", help="Name of the database to connect to")
    parser.add_argument("port", type=int, help="Port the database server listens on")
    parser.add_argument("user", help="Database user name")
    parser.add_argument("password", nargs="?", default="", help="Database password (may be empty)")
    return parser.parse_args(argv)


def connect(config: ConnectionConfig, console: Console) -> DatabaseGateway:
    console.write(INFO_CONNECTING)
    console.write(INFO_CONNECTION_URL.format(url=config.display_url()))
    gateway = DatabaseGateway.connect(config)
    console.write(INFO_CONNECTED)
    return gateway


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    console = console or Console()
    console.write(GREETING)

    config = ConnectionConfig(dbname=args.dbname, port=args.port, user=args.user, password=args.password)
    try:
        gateway = connect(config, console)
    except GatewayConnectionError as e:
        console.error(str(e))
        console.error(ERROR_DATABASE_CONNECTION_HINT)
        return EXIT_CONNECTION_FAILURE

    dispatcher = MenuDispatcher(gateway, console)
    try:
        dispatcher.run()
    except EOFError:
        logger.info("Input closed, leaving the menu loop")
    except Exception as e:
        logger.debug("Menu loop aborted", exc_info=True)
        console.error(str(e))
        return EXIT_UNEXPECTED_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
