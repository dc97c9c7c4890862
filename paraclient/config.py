"""Client configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://paraio.com"
DEFAULT_PATH = "/v1/"


class SigningSettings(BaseModel):
    """Request signing configuration.

    The API server verifies AWS Signature V4 signatures computed for its own
    service name and a fixed region.
    """

    service_name: str = "para"
    region: str = "us-east-1"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via PARA_OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class ClientSettings(BaseSettings):
    """Settings for a ParaClient.

    Every field can be overridden from the environment:

        PARA_ACCESS_KEY=app:myapp
        PARA_SECRET_KEY=...
        PARA_ENDPOINT=http://localhost:8080
        PARA_API_PATH=/v1/
        PARA_SIGNING__REGION=us-east-1
    """

    model_config = SettingsConfigDict(
        env_prefix="PARA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows PARA_SIGNING__REGION syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    access_key: str = ""
    secret_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    api_path: str = DEFAULT_PATH

    # Seconds, passed to httpx
    timeout: float = 30.0

    signing: SigningSettings = SigningSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @computed_field
    @property
    def base_url(self) -> str:
        """Endpoint followed by the API path, e.g. https://paraio.com/v1/."""
        return f"{self.endpoint.rstrip('/')}{normalize_api_path(self.api_path)}"


def normalize_api_path(path: str | None) -> str:
    """Return the API path with a trailing slash, or the default when blank."""
    if not path:
        return DEFAULT_PATH
    if not path.endswith("/"):
        path += "/"
    return path
