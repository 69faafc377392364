from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://sharpapi.com/api/v1"


class SharpApiSettings(BaseSettings):
    """
    Client configuration loaded from environment variables or a ``.env`` file.
    Only the API key is mandatory.
    """

    api_key: str = Field(..., alias="SHARP_API_KEY")
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, alias="SHARP_API_BASE_URL")
    timeout: float = Field(default=180.0, alias="SHARP_API_TIMEOUT")

    service_name: str = Field(
        default="sharpapi-travel-review-sentiment", alias="SERVICE_NAME"
    )
    environment: str = Field(default="development", alias="ENVIRONMENT")
    json_logs: bool = Field(default=False, alias="JSON_LOGS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    tracing_enabled: bool = Field(default=False, alias="TRACING_ENABLED")
    otlp_endpoint: str | None = Field(default=None, alias="OTLP_ENDPOINT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
