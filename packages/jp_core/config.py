from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from packages.jp_core.errors import ConfigurationError

class JobAppConfig(BaseSettings):
    """
    Application-wide settings.
    Values come from environment variables and an optional .env file.
    """
    PROJECT_NAME: str = "JobApp Job Posting Service"
    VERSION: str = "0.1.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging (LOG_DIR unset -> console only)
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Registry
    SEED_DEFAULT_JOBS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # ignore unrelated environment variables
    )

    @classmethod
    def load(cls) -> "JobAppConfig":
        """
        Load settings, wrapping any failure in ConfigurationError.
        """
        try:
            return cls()
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
