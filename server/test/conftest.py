import io

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.console import Console
from app.db import create_schema
from utilities.connections.gateway import DatabaseGateway


def make_console(*lines: str) -> Console:
    """Console whose input is the given lines, with captured output streams."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO(), stderr=io.StringIO())


@pytest.fixture
def console_factory():
    return make_console


@pytest.fixture
def gateway():
    """
    Gateway over an in-memory SQLite database holding the hotel schema.

    StaticPool keeps the single in-memory connection alive for the whole test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    gateway = DatabaseGateway(engine)
    yield gateway
    gateway.close()


@pytest.fixture
def seed(gateway):
    """Run raw fixture INSERT statements through the gateway."""

    def _seed(*statements: str):
        for statement in statements:
            gateway.execute_update(statement)

    return _seed
