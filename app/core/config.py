
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Waste Dashboard API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    # Database (Postgres via asyncpg, or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./waste_dashboard_dev.db",
        alias="DATABASE_URL",
    )
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    # Sessions
    session_cookie_name: str = Field(default="session_token", alias="SESSION_COOKIE_NAME")
    session_ttl_hours: int = Field(default=24, alias="SESSION_TTL_HOURS")
    cookie_secure: bool = Field(default=False, alias="COOKIE_SECURE")
    password_iterations: int = Field(
        default=310_000, alias="PASSWORD_ITERATIONS",
    )  # PBKDF2-SHA256 rounds

    # Audit trail of write requests
    audit_enabled: bool = Field(default=True, alias="AUDIT_ENABLED")

    # OpenAI (insights)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    openai_max_tokens: int = Field(default=1500, alias="OPENAI_MAX_TOKENS")
    openai_timeout: int = Field(default=60, alias="OPENAI_TIMEOUT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def ai_enabled(self) -> bool:
        """AI insights are generated only when an OpenAI key is configured."""
        return bool(self.openai_api_key)

    @property
    def session_ttl_seconds(self) -> int:
        return self.session_ttl_hours * 3600

settings = Settings()
