"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import CANDIDATES_COLLECTION, DEFAULT_JOB_ROLES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str
    CANDIDATES_COLLECTION: str = CANDIDATES_COLLECTION

    # Form options (comma separated)
    JOB_ROLES: str = ",".join(DEFAULT_JOB_ROLES)

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def job_roles(self) -> tuple[str, ...]:
        """Configured job roles, in declaration order."""
        return tuple(r.strip() for r in self.JOB_ROLES.split(",") if r.strip())


settings = Settings()  # type: ignore[call-arg]
