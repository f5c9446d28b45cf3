from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from sqlalchemy.engine import URL
import os

class Settings(BaseSettings):
    APP_NAME: str = "AAP Simulator"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: Optional[str] = None  # overrides the DEBUG-derived level
    QUIET_LOGGERS: list[str] = ["uvicorn.access", "sqlalchemy.engine"]

    HOST: str = "0.0.0.0"
    PORT: int = int(os.getenv("PORT", "8080"))

    # Connection parameters use the standard libpq variable names
    PGHOST: str = os.getenv("PGHOST", os.getenv("POSTGRES_HOST", "localhost"))
    PGPORT: int = int(os.getenv("PGPORT", "5432"))
    PGUSER: str = os.getenv("PGUSER", "postgres")
    PGPASSWORD: str = os.getenv("PGPASSWORD", "postgres")
    PGDATABASE: str = os.getenv("PGDATABASE", "postgres")

    DATABASE_URL: Optional[str] = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    class Config:
        env_file = ".env"
        env_prefix = "AAPSIM_"

    @property
    def database_url(self) -> str:
        """Full SQLAlchemy URL, built from the PG* fields unless overridden."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg",
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )
        return url.render_as_string(hide_password=False)

@lru_cache()
def get_settings():
    return Settings()
