"""Application configuration settings."""
import os
from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Requirements Generator API"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # OpenAI
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-5"
    openai_timeout: float = 180.0

    # Output contract sent as response_format
    schema_variant: Literal["strict", "permissive"] = "strict"

    class Config:
        # Look for .env in project root (parent of server_py)
        env_file = os.path.join(Path(__file__).parent.parent.parent, ".env")
        case_sensitive = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-5"),
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "180")),
            schema_variant=os.getenv("REQUIREMENTS_SCHEMA_VARIANT", "strict"),
            environment=os.getenv("NODE_ENV", "development"),
            port=int(os.getenv("PORT", "5000")),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
