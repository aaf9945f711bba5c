"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    # Mailgun
    mailgun_domain: Optional[str] = None
    mailgun_api_key: Optional[str] = None
    mailgun_api_base: str = "https://api.mailgun.net/v3"

    # Slack
    slack_channel: Optional[str] = None
    slack_endpoint: Optional[str] = None

    # Application
    environment: str = "development"
    root_redirect: Optional[str] = None
    allowed_origins: str = ""  # comma-separated
    test: bool = False
    forms_file: Optional[Path] = None
    notification_timeout: float = 10.0

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def allowed_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def email_enabled(self) -> bool:
        return bool(self.mailgun_domain and self.mailgun_api_key)

    @property
    def chat_enabled(self) -> bool:
        return bool(self.slack_channel and self.slack_endpoint)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
