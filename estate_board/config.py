from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    database_url: str = "sqlite:///./estate_board.db"
    app_name: str = "Estate Board"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 3000

    # Хеш пароля администратора (argon2/bcrypt). Пароль по умолчанию не задаётся:
    # без хеша любой вход в панель отклоняется.
    admin_password_hash: Optional[str] = None
    session_secret: Optional[str] = None
    session_max_age: int = 12 * 60 * 60  # Время жизни cookie администратора в секундах
    session_https_only: bool = False

    upload_max_file_size: int = 10 * 1024 * 1024
    upload_max_files: int = 12

    default_listing_type: str = "mieszkanie"

    # Внешний вебхук, ответ которого отдаётся на /api/feed
    feed_url: Optional[str] = None
    feed_ttl: float = 3600.0
    feed_timeout: float = 10.0

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
