"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings

# Check if .env file exists and is readable
_env_file = None
try:
    env_path = Path(".env")
    if env_path.exists() and os.access(env_path, os.R_OK):
        _env_file = ".env"
except (OSError, PermissionError):
    # If we can't access .env, continue without it
    pass


class Settings(BaseSettings):
    """All configuration for the org ledger application.

    Values are loaded from environment variables or a .env file.
    """

    # Application
    app_name: str = "org-ledger"
    debug: bool = False

    # Database (in-memory unless overridden)
    database_url: str = "sqlite:///:memory:"

    # Sample data
    seed_sample_data: bool = True
    sample_company_name: str = "Acme Inc."

    # Report defaults
    top_sales_count: int = 3
    podium_size: int = 3  # leaderboard ranks flagged as podium
    search_result_limit: int = 10

    # Presentation
    currency_symbol: str = "$"
    date_format: str = "%Y-%m-%d"

    model_config = {
        "env_file": _env_file,
        "env_file_encoding": "utf-8",
        "env_file_ignore_empty": True,
    }
