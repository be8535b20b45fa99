from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central config loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------
    # Analysis defaults
    # -------------------------
    alpha: float = Field(0.05, alias="TTEST_ALPHA", gt=0, lt=1)
    default_iv_name: str = Field("Independent Variable", alias="TTEST_DEFAULT_IV_NAME")
    default_dv_name: str = Field("Dependent Variable", alias="TTEST_DEFAULT_DV_NAME")

    # Rows/values shown in each step before "... and so on"
    preview_rows: int = Field(5, alias="TTEST_PREVIEW_ROWS", ge=1)

    # -------------------------
    # Service
    # -------------------------
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")


settings = Settings()
