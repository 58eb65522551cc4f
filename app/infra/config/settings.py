from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Helio
    HELIO_WEBHOOK_SECRET: SecretStr | None = None

    # CORS
    ALLOWED_ORIGINS: str = (
        "https://sirens-fortune-xr3h.bolt.host,http://localhost:5173,http://localhost:3000"
    )

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def WEBHOOK_SECRET(self) -> str | None:
        if self.HELIO_WEBHOOK_SECRET is None:
            return None
        return self.HELIO_WEBHOOK_SECRET.get_secret_value() or None

    @property
    def ORIGINS(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
