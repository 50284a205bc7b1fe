"""Configuration management for the NYT Most Popular reader.

All configuration comes from environment variables. Uses pydantic-settings
so a missing API key or an unsupported endpoint variant fails at startup
instead of on the first fetch.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MOST_POPULAR_KINDS = ("emailed", "viewed", "shared")
MOST_POPULAR_PERIODS = (1, 7, 30)

DEFAULT_IMAGE_URL = "https://static01.nyt.com/images/icons/t_logo_291_black.png"


class Config(BaseSettings):
    """Reader configuration loaded from environment variables."""

    nyt_api_key: SecretStr = Field(alias="NYT_API_KEY")
    nyt_base_url: str = Field(default="https://api.nytimes.com/svc/", alias="NYT_BASE_URL")
    most_popular_kind: str = Field(default="emailed", alias="NYT_MOST_POPULAR_KIND")
    most_popular_period: int = Field(default=30, alias="NYT_MOST_POPULAR_PERIOD")
    default_image_url: str = Field(default=DEFAULT_IMAGE_URL, alias="NYT_DEFAULT_IMAGE_URL")
    request_timeout: float = Field(default=30.0, alias="NYT_REQUEST_TIMEOUT")
    server_host: str = Field(default="127.0.0.1", alias="MCP_SERVER_HOST")
    server_port: int = Field(default=8000, alias="MCP_SERVER_PORT")

    model_config = SettingsConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("most_popular_kind")
    @classmethod
    def _check_kind(cls, value: str) -> str:
        if value not in MOST_POPULAR_KINDS:
            raise ValueError(f"must be one of {', '.join(MOST_POPULAR_KINDS)}")
        return value

    @field_validator("most_popular_period")
    @classmethod
    def _check_period(cls, value: int) -> int:
        if value not in MOST_POPULAR_PERIODS:
            raise ValueError(f"must be one of {MOST_POPULAR_PERIODS}")
        return value

    @property
    def most_popular_path(self) -> str:
        """Endpoint path relative to the base URL, e.g. mostpopular/v2/emailed/30.json."""
        return f"mostpopular/v2/{self.most_popular_kind}/{self.most_popular_period}.json"


def load_config() -> Config:
    """Load and validate config from environment. Raises on missing API key."""
    return Config()
