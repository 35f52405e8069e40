from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    """Job settings loaded from environment variables and CLI overrides."""

    # App
    app_name: str = "Silence Overview"
    debug: bool = False
    dry_run: bool = False  # Render and merge, but skip the discussion write

    # GitHub
    github_api_url: str = "https://api.github.com/"
    github_token: str = ""
    github_org: str = "org"
    github_team: str = "team"
    github_discussion_title: str = "Silence Overview"
    github_alertmanager_name: str = "default"  # Section heading and marker identity
    github_verify_ssl: bool = True

    # Alertmanager
    alertmanager_addr: str = "http://localhost:9093"
    silence_comment_filter: str = "automated silence|silenced our tenants"

    # Outbound HTTP
    request_timeout: int = 30  # Seconds

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


def get_settings(**overrides) -> Settings:
    """Build settings once at startup; explicit overrides win over the environment."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
