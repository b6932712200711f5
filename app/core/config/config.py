"""Application configuration settings.

Defines and loads configuration variables and settings used across the application,
including environment-specific and default configurations.
"""

import json
from pathlib import Path

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.config.logging_sink import LoggingSink


class _Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    POSTGRES_HOST: str = Field(..., alias="POSTGRES_HOST")
    POSTGRES_PORT: int = Field(..., alias="POSTGRES_PORT")
    POSTGRES_DB: str = Field(..., alias="POSTGRES_DB")
    POSTGRES_SCHEMA: str = Field(default="recipe_manager", alias="POSTGRES_SCHEMA")
    RECIPE_MANAGER_DB_USER: str = Field(..., alias="RECIPE_MANAGER_DB_USER")
    RECIPE_MANAGER_DB_PASSWORD: str = Field(..., alias="RECIPE_MANAGER_DB_PASSWORD")

    DB_CONNECT_MAX_RETRIES: int = Field(default=3, alias="DB_CONNECT_MAX_RETRIES", ge=1)
    DB_CONNECT_RETRY_DELAY: float = Field(
        default=0.5,
        alias="DB_CONNECT_RETRY_DELAY",
        ge=0,
    )

    ALLOWED_ORIGINS: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:8080",
            "https://localhost:3000",
        ],
        alias="ALLOWED_ORIGINS",
    )

    LOGGING_CONFIG_PATH: str = Field(
        str(
            (
                Path(__file__).parent.parent.parent.parent / "config" / "logging.json"
            ).resolve(),
        ),
        alias="LOGGING_CONFIG_PATH",
    )

    _LOGGING_SINKS: list[LoggingSink] = PrivateAttr(default_factory=list)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_default=True,
        extra="ignore",
    )

    def __init__(self) -> None:
        """Load logging config after Pydantic initialization."""
        super().__init__()

        config_path = Path(self.LOGGING_CONFIG_PATH).expanduser().resolve()
        with config_path.open("r", encoding="utf-8") as f:
            config = json.load(f)
        sinks = config.get("sinks", [])
        self._LOGGING_SINKS = [
            LoggingSink.from_dict(s) for s in sinks if isinstance(s, dict)
        ]

    @property
    def postgres_host(self) -> str:
        return self.POSTGRES_HOST

    @property
    def postgres_port(self) -> int:
        return self.POSTGRES_PORT

    @property
    def postgres_db(self) -> str:
        return self.POSTGRES_DB

    @property
    def postgres_schema(self) -> str:
        return self.POSTGRES_SCHEMA

    @property
    def recipe_manager_db_user(self) -> str:
        return self.RECIPE_MANAGER_DB_USER

    @property
    def recipe_manager_db_password(self) -> str:
        return self.RECIPE_MANAGER_DB_PASSWORD

    @property
    def database_url(self) -> str:
        """Get the SQLAlchemy URL of the recipe manager database."""
        return (
            f"postgresql+psycopg2://{self.RECIPE_MANAGER_DB_USER}:"
            f"{self.RECIPE_MANAGER_DB_PASSWORD}@{self.POSTGRES_HOST}:"
            f"{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def db_connect_max_retries(self) -> int:
        """Get the number of attempts made to open a database session."""
        return self.DB_CONNECT_MAX_RETRIES

    @property
    def db_connect_retry_delay(self) -> float:
        """Get the initial delay, in seconds, between connection attempts."""
        return self.DB_CONNECT_RETRY_DELAY

    @property
    def allowed_origins(self) -> list[str]:
        """Get allowed origins for CORS."""
        return self.ALLOWED_ORIGINS

    @property
    def logging_sinks(self) -> list[LoggingSink]:
        return self._LOGGING_SINKS

    @property
    def logging_stdout_sink(self) -> LoggingSink | None:
        return next(
            (sink for sink in self._LOGGING_SINKS if sink.sink == "sys.stdout"),
            None,
        )

    @property
    def logging_file_sink(self) -> LoggingSink | None:
        return next(
            (
                sink
                for sink in self._LOGGING_SINKS
                if isinstance(sink.sink, str) and sink.sink.endswith(".log")
            ),
            None,
        )


_settings: _Settings | None = None


def get_settings() -> _Settings:
    """Get application settings singleton.

    Returns:
        _Settings: Application settings instance
    """
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = _Settings()
    return _settings


settings = get_settings()
