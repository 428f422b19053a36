from pathlib import Path

from pydantic_settings import BaseSettings

PUBLIC_PATH = Path(__file__).resolve().parent / "web" / "public"


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URL of the credential store, database name in the path
    host: str
    port: int
    debug: bool
    session_max_age_seconds: int = 24 * 60 * 60
    session_sweep_interval_seconds: int = 60
    cookie_secure: bool = False  # Set to True in production with HTTPS
    credential_store_timeout_ms: int = 5000
    cors_origins: list[str] = []
    public_path: Path = PUBLIC_PATH  # Directory with login.html and home.html

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SESSIONGATE_",
        "extra": "ignore",
    }
