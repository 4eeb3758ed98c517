from utilities.connection_config import ConnectionConfig


def test_url_without_password():
    config = ConnectionConfig(dbname="hotels", port=5432, user="alice", host="localhost", driver="postgresql+psycopg2")

    url = config.url()

    assert url.drivername == "postgresql+psycopg2"
    assert url.username == "alice"
    assert url.password is None
    assert url.host == "localhost"
    assert url.port == 5432
    assert url.database == "hotels"


def test_display_url_hides_password():
    config = ConnectionConfig(dbname="hotels", port=5433, user="alice", password="secret", host="db")

    display = config.display_url()

    assert "secret" not in display
    assert "db:5433/hotels" in display
    assert config.url().password == "secret"
