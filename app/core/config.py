from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Deposits are capped at this share of the client's outstanding job total
    deposit_cap_ratio: float = Field(default=0.25, gt=0, le=1, alias="DEPOSIT_CAP_RATIO")

    # Reporting
    best_clients_default_limit: int = Field(default=2, ge=1, alias="BEST_CLIENTS_DEFAULT_LIMIT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Frontend URL allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str:
        if v is None or v == "":
            return "INFO"
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
