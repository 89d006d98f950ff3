from pydantic_settings import BaseSettings
from dotenv import load_dotenv, find_dotenv
from os import getenv
from typing import Optional

_env_path = find_dotenv()  # locate a .env file in this folder or parent folders
if _env_path:
    load_dotenv(_env_path)


class Settings(BaseSettings):
    # Database related
    DB_HOST_IP: Optional[str] = getenv('DB_HOST_IP')
    DB_USER: Optional[str] = getenv('DB_USER')
    DB_PASSWORD: Optional[str] = getenv('DB_PASSWORD')
    DB_NAME: Optional[str] = getenv('DB_NAME')
    # full SQLAlchemy URL; wins over the DB_* parts when set
    DATABASE_URL: Optional[str] = getenv('DATABASE_URL')

    # Where admin collections come from: static | database | rest
    COLLECTION_BACKEND: str = getenv('COLLECTION_BACKEND', 'database')

    # Upstream admin REST API (only used by the rest backend)
    UPSTREAM_API_URL: Optional[str] = getenv('UPSTREAM_API_URL')
    UPSTREAM_API_TOKEN: Optional[str] = getenv('UPSTREAM_API_TOKEN')

    # Logging
    LOG_LEVEL: str = getenv('LOG_LEVEL', 'info')
    ENVIRONMENT: str = getenv('ENVIRONMENT', 'development')

    # Cache
    COLLECTION_CACHE_TTL: int = int(getenv('COLLECTION_CACHE_TTL', '300'))
    CACHE_CLEANUP_INTERVAL_SECONDS: int = int(getenv('CACHE_CLEANUP_INTERVAL_SECONDS', '60'))

    # Pagination bounds
    DEFAULT_PAGE_SIZE: int = int(getenv('DEFAULT_PAGE_SIZE', '20'))
    MAX_PAGE_SIZE: int = int(getenv('MAX_PAGE_SIZE', '100'))

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST_IP}:5432/{self.DB_NAME}"

settings = Settings()
