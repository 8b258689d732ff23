from pathlib import Path

from pydantic_settings import BaseSettings

# Application version - single source of truth
APP_VERSION = "0.3.0"

# Base directory for path calculations
_base_dir = Path(__file__).resolve().parent.parent.parent.parent


class Settings(BaseSettings):
    app_name: str = "Spoolshelf"
    debug: bool = False  # Default to production mode

    # Paths
    base_dir: Path = _base_dir
    data_dir: Path = base_dir / "data"
    log_dir: Path = base_dir / "logs"
    database_url: str = f"sqlite+aiosqlite:///{data_dir / 'spoolshelf.db'}"

    # Logging
    log_level: str = "INFO"  # Override with LOG_LEVEL env var or DEBUG=true
    log_to_file: bool = True  # Set to false to disable file logging

    # API
    api_prefix: str = "/api/v1"

    # Inventory
    seed_sample_inventory: bool = True  # Demo items when the inventory starts empty
    default_spool_weight: float = 1000  # Nominal net weight (g) for new items

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

# Ensure directories exist
settings.data_dir.mkdir(exist_ok=True)
if settings.log_to_file:
    settings.log_dir.mkdir(exist_ok=True)
