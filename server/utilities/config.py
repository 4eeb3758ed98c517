import os

from dotenv import load_dotenv

load_dotenv()

DB_HOST = os.getenv("HOTEL_DB_HOST", "localhost")
DB_DRIVER = os.getenv("HOTEL_DB_DRIVER", "postgresql+psycopg2")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
