"""
Common Configuration
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class BaseAppConfig(BaseSettings):
    """
    Common application settings.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default="config/journal_log.yaml", description="Logging YAML (dictConfig) path"
    )
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")

    # ===== AWS Defaults =====
    AWS_REGION: str = Field(default="us-east-1", description="AWS region for ledger APIs")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )
