# minitwit/core/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_EXPIRE_MIN: int = 1440
    DATABASE_URL: str = "sqlite+aiosqlite:///./minitwit.db"

    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "info"

    # 📨 cuántos mensajes / follows devuelve el simulador si no manda ?no=
    PER_PAGE: int = 100

    # 👥 reglas de follow que el simulador no fija
    ALLOW_SELF_FOLLOW: bool = False
    DUPLICATE_FOLLOW_IS_ERROR: bool = False

    # Si se define, el header Authorization debe coincidir exactamente
    # (p.ej. "Basic c2ltdWxhdG9yOnN1cGVyX3NhZmUh")
    SIMULATOR_AUTHORIZATION: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allow_origins_list(self) -> List[str]:
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()


def get_settings() -> Settings:
    """Dependencia FastAPI; los tests la sobreescriben con su propio Settings."""
    return settings
