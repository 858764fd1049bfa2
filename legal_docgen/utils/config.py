"""Configuration management using pydantic-settings"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    log_level: str = Field(default="INFO", description="Logging level")

    # Extra JSON templates, loaded after the built-in French set
    templates_dir: Optional[str] = Field(
        default=None,
        description="Directory of additional *.json document templates",
    )

    # CLI export
    output_dir: str = Field(default="./data/documents", description="Where the CLI saves generated documents")

    # API settings
    api_title: str = Field(default="French Legal Documents API", description="OpenAPI title")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    class Config:
        env_prefix = "LEGAL_DOCGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings"""
    return Settings()
