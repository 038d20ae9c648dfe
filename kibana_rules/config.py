"""Client configuration using Pydantic settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Kibana detection engine connection settings."""

    # Kibana connection
    url: str = "http://localhost:5601"
    space: str | None = None
    verify_ssl: bool = True
    timeout: float = 30.0

    # Credentials (basic auth, or an API key which takes precedence)
    username: str | None = None
    password: str | None = None
    api_key: str | None = None

    model_config = {"env_prefix": "KIBANA_"}
