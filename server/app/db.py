from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

HotelBase = declarative_base()


def create_schema(engine: Engine):
    """
    Create every hotel table on the given engine.

    The console itself never creates tables; this is used to stand up a
    scratch database, e.g. for tests.
    """
    # Register the models on HotelBase before creating tables.
    from app.models import hotel_models  # noqa: F401

    HotelBase.metadata.create_all(bind=engine)
