from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import List

class Settings(BaseSettings):
    # Empty means open mode: the /api routes accept every request
    API_KEY: str = ""

    PGHOST: str = "localhost"
    PGPORT: int = 5432
    PGDATABASE: str = "postgres"
    PGUSER: str = "postgres"
    PGPASSWORD: str = ""
    PGSSL: bool = True
    DB_CONNECT_TIMEOUT: int = 5  # seconds

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    CORS_ORIGINS: List[str] = ["*"]

    API_TITLE: str = "Booking Engine"
    API_DESCRIPTION: str = "Form schema and price quotes for vehicle bookings"
    API_VERSION: str = "0.1.0"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> URL:
        return URL.create(
            "postgresql+asyncpg",
            username=self.PGUSER,
            password=self.PGPASSWORD or None,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )

settings = Settings()
