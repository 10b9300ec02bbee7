"""
Environment settings module
Selects the configuration class for the current ENV and validates it
"""
import os
from pathlib import Path
from typing import List
from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class BaseConfig(BaseSettings):
    """
    Base settings class
    Settings shared by every environment
    """
    # ===========================================
    # Application
    # ===========================================
    SERVICE_NAME: str = Field(default="dummy-data-generator")
    ENV: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)

    # ===========================================
    # Generation ceilings
    # ===========================================
    MAX_FIELDS: int = Field(default=1000)
    MAX_SUB_MODULES: int = Field(default=6)  # node count grows factorially
    MAX_ARRAY_SIZE: int = Field(default=1000)
    # combined budget; output grows with arraySize at every nesting level
    MAX_OUTPUT_VALUES: int = Field(default=100_000)

    # ===========================================
    # Pages
    # ===========================================
    TEMPLATES_DIR: str = Field(default=str(PACKAGE_DIR / "templates"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v_upper

    @cached_property
    def is_production(self) -> bool:
        return self.ENV.lower() in ("prod", "production")

    @property
    def index_page_path(self) -> Path:
        """Path of the static preview page"""
        return Path(self.TEMPLATES_DIR) / "index.html"


class DevelopmentConfig(BaseConfig):
    """Development settings"""
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")


class StagingConfig(BaseConfig):
    """Staging settings"""
    ENV: str = Field(default="staging")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")


class ProductionConfig(BaseConfig):
    """Production settings"""
    ENV: str = Field(default="production")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="WARNING")


class TestConfig(BaseConfig):
    """Test settings"""
    ENV: str = Field(default="test")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")


def get_settings() -> BaseConfig:
    """
    Return the settings object for the current environment

    The ENV environment variable picks the configuration class.
    """
    env = os.getenv("ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "dev": DevelopmentConfig,
        "local": DevelopmentConfig,
        "staging": StagingConfig,
        "stage": StagingConfig,
        "production": ProductionConfig,
        "prod": ProductionConfig,
        "test": TestConfig,
        "testing": TestConfig,
    }

    config_class = config_map.get(env, DevelopmentConfig)
    return config_class()


# Global settings instance
settings = get_settings()


# ===========================================
# Validation
# ===========================================

def validate_required_settings(config: BaseConfig = None) -> List[str]:
    """
    Check that the generation ceilings are usable

    Returns:
        Names of misconfigured settings
    """
    config = config or settings
    invalid = []

    for name in (
        "MAX_FIELDS", "MAX_SUB_MODULES", "MAX_ARRAY_SIZE", "MAX_OUTPUT_VALUES"
    ):
        if getattr(config, name) < 1:
            invalid.append(name)

    if config.is_production and config.DEBUG:
        invalid.append("DEBUG")

    if not config.index_page_path.exists():
        invalid.append("TEMPLATES_DIR")

    return invalid
