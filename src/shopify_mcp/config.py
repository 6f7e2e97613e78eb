"""Configuration management for the Shopify MCP server."""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .connectors.graphql import DEFAULT_API_VERSION, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Application settings, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env" if os.getenv("ENVIRONMENT") != "test" else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shopify MCP"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = Field(default="INFO", description="Root log level")

    # Shopify
    shopify_access_token: Optional[str] = Field(
        default=None, description="Admin API access token (shpat_...)"
    )
    myshopify_domain: Optional[str] = Field(
        default=None, description="Store domain, e.g. my-store.myshopify.com"
    )
    shopify_api_version: str = DEFAULT_API_VERSION
    shopify_request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    # Metrics
    enable_metrics: bool = False
    metrics_port: int = Field(default=9090, ge=1, le=65535)

    @field_validator("shopify_access_token", "myshopify_domain", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper() if v else "INFO"

    def missing_credentials(self) -> list:
        """Names of the required Shopify settings that are not set."""
        missing = []
        if not self.shopify_access_token:
            missing.append("SHOPIFY_ACCESS_TOKEN")
        if not self.myshopify_domain:
            missing.append("MYSHOPIFY_DOMAIN")
        return missing


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
