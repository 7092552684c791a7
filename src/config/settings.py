"""Application settings using Pydantic BaseSettings."""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Permaculture AI"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_token_budgets_positive(self) -> "Settings":
        for field_name in (
            "consult_max_tokens",
            "plan_max_tokens",
            "diagnose_max_tokens",
            "grid_plan_max_tokens",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_min_query_length(self) -> "Settings":
        if self.min_query_length < 0:
            raise ValueError(f"min_query_length must not be negative, got {self.min_query_length}")
        return self

    # Anthropic
    anthropic_api_key: str | None = None
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_base_url: str | None = None

    # Token budgets per operation
    consult_max_tokens: int = 1000
    plan_max_tokens: int = 1200
    diagnose_max_tokens: int = 1000
    grid_plan_max_tokens: int = 1500

    # Relevance classifier
    min_query_length: int = 10
    lexicon_extra_in_scope: list[str] = []
    lexicon_extra_off_topic: list[str] = []

    # Audit (empty path = log only)
    audit_log_path: str = ""

    # CORS
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "POST, GET, OPTIONS"
    cors_allow_headers: str = "Content-Type"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
