"""Configuration management - environment-driven settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GRAPH_API_BASE = "https://graph.facebook.com"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=7000, description="Bind port")
    reload: bool = Field(default=False, description="Auto-reload on code changes")

    # WhatsApp Business API
    whatsapp_api_url: str | None = Field(
        default=None,
        description="Full messages endpoint; overrides the phone-id derived URL",
    )
    whatsapp_phone_id: str = Field(default="", description="WhatsApp Business phone number ID")
    whatsapp_api_version: str = Field(default="v21.0", description="Graph API version")
    whatsapp_access_token: str = Field(
        default="",
        validation_alias=AliasChoices("whatsapp_access_token", "whatsapp_token"),
        description="Meta WhatsApp API access token",
    )
    whatsapp_verify_token: str = Field(
        default="",
        validation_alias=AliasChoices("whatsapp_verify_token", "mytoken"),
        description="Webhook verification token",
    )
    http_timeout_seconds: float = Field(default=30.0, gt=0, description="Outbound request timeout")

    # Replies
    unmatched_text_reply: str | None = Field(
        default=None,
        description="Reply for text other than the greeting; unset means stay silent",
    )

    @property
    def messages_url(self) -> str | None:
        """Endpoint outbound messages are POSTed to."""
        if self.whatsapp_api_url:
            return self.whatsapp_api_url
        if not self.whatsapp_phone_id:
            return None
        return f"{GRAPH_API_BASE}/{self.whatsapp_api_version}/{self.whatsapp_phone_id}/messages"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
