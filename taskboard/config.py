from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str
    ENV: str = "local"  # local | prod | test

    HOST: str = "localhost"
    PORT: int = 8080
    API_PREFIX: str = ""
    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Create tables on startup instead of running Alembic migrations
    AUTO_CREATE_TABLES: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_postgres_url(cls, v):
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+psycopg2://" + v[len(prefix):]
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
