from dataclasses import dataclass, field

from sqlalchemy.engine import URL
from utilities.config import DB_DRIVER, DB_HOST


@dataclass
class ConnectionConfig:
    dbname: str
    port: int
    user: str
    password: str = ""
    host: str = field(default_factory=lambda: DB_HOST)
    driver: str = field(default_factory=lambda: DB_DRIVER)

    def url(self) -> URL:
        """Build the SQLAlchemy URL; an empty password is omitted from the URL."""
        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.dbname,
        )

    def display_url(self) -> str:
        return self.url().render_as_string(hide_password=True)
