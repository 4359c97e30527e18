from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

API_PROXY_PREFIX = "/api"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    ENVIRONMENT: str = "development"
    PRODUCTION_BACKEND_URL: str = "https://postmanage.onrender.com/api"
    DEVELOPMENT_BACKEND_URL: str = "http://localhost:5203/api"
    BACKEND_API_URL: Optional[str] = None

    USE_API_PROXY: bool = False
    PROXY_BASE_URL: str = "http://localhost:8000"

    BACKEND_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"

    @property
    def backend_origin(self) -> str:
        """Backend the proxy relays to and the client calls in direct mode."""
        if self.BACKEND_API_URL:
            origin = self.BACKEND_API_URL
        elif self.ENVIRONMENT.lower() == "production":
            origin = self.PRODUCTION_BACKEND_URL
        else:
            origin = self.DEVELOPMENT_BACKEND_URL
        return origin.rstrip("/")

    @property
    def api_base_url(self) -> str:
        if self.USE_API_PROXY:
            return self.PROXY_BASE_URL.rstrip("/") + API_PROXY_PREFIX
        return self.backend_origin
