from typing import Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

from statusboard.exceptions import ConfigurationError


class Settings(BaseSettings):
    db_host: Optional[str] = None
    db_username: Optional[str] = None
    db_password: Optional[str] = None
    db_port: int = 3306
    db_name: str = "centreon_storage"
    db_driver: str = "mysql+pymysql"
    database_url: Optional[str] = None

    # Service hidden from every page (e.g. the poller's own heartbeat check)
    excluded_service_id: Optional[int] = None
    display_timezone: str = "UTC"

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    class Config:
        env_file = ".env"
        case_sensitive = False


REQUIRED_DATABASE_KEYS = {
    "DB_HOST": "db_host",
    "DB_USERNAME": "db_username",
    "DB_PASSWORD": "db_password",
}


def require_database_settings(settings: Settings) -> None:
    """
    Fail fast when the connection parameters are incomplete.

    A full DATABASE_URL makes the individual DB_* keys optional.

    Raises:
        ConfigurationError: naming every missing key
    """
    if settings.database_url:
        return
    missing = [
        key for key, attr in REQUIRED_DATABASE_KEYS.items()
        if not getattr(settings, attr)
    ]
    if missing:
        raise ConfigurationError(missing)


def database_url(settings: Settings) -> URL:
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        settings.db_driver,
        username=settings.db_username,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


settings = Settings()
