from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field("sqlite:///bulletin_board.db", description="SQLAlchemy database URL")
    api_title: str = Field("Stick It", description="Title shown by the app")
    session_cookie_name: str = Field("sessionId", description="Cookie carrying the session token")
    session_lifetime_minutes: int | None = Field(
        None, description="Session lifetime; unset keeps sessions until far in the future"
    )
    auth_rate_limit: str = Field("5/minute", description="Rate limit for login and register")
    default_icon: str = Field(
        "https://icon-library.com/images/default-user-icon/default-user-icon-8.jpg",
        description="Icon given to users without one",
    )
    reset_database: bool = Field(False, description="Drop and recreate tables on startup")
    log_dir: str = Field("logs", description="Directory for the server log file")
    log_level: str = Field("INFO", description="Console log level")
    host: str = Field("127.0.0.1", description="Bind address")
    port: int = Field(1339, description="Bind port")


settings = Settings()
