"""Application settings management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "WhatsApp Bling Bot"
    app_version: str = "0.1.0"
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    bling_api_key: str | None = Field(default=None, alias="BLING_API_KEY")
    bling_api_url: str = Field(default="https://bling.com.br/Api/v2/produtos/json", alias="BLING_API_URL")
    bling_page_size: int = Field(default=100, alias="BLING_PAGE_SIZE")
    catalog_provider: Literal["bling", "mock"] = Field(default="bling", alias="CATALOG_PROVIDER")
    cache_duration_seconds: float = Field(default=3600.0, alias="CACHE_DURATION_SECONDS")

    whatsapp_token: str | None = Field(default=None, alias="WHATSAPP_TOKEN")
    whatsapp_phone_id: str | None = Field(default=None, alias="WHATSAPP_PHONE_ID")
    whatsapp_api_url: str = Field(default="https://graph.facebook.com/v18.0", alias="WHATSAPP_API_URL")
    messaging_provider: Literal["whatsapp", "mock"] = Field(default="whatsapp", alias="MESSAGING_PROVIDER")

    verify_token: str = Field(default="seu_token_verificacao", alias="VERIFY_TOKEN")
    owner_phone: str | None = Field(default=None, alias="OWNER_PHONE")
    http_timeout_seconds: float = Field(default=10.0, alias="HTTP_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="forbid",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


settings = Settings()
