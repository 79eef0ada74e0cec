"""Configuration utilities.

Environment driven settings (data location, log level). A .env file in the
working directory is loaded on import.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ridership.analysis.sources.open_data import DEFAULT_URL

load_dotenv()


@dataclass(slots=True)
class Settings:
    data_file: str | None = os.getenv("RIDERSHIP_DATA_FILE")
    data_url: str = os.getenv("RIDERSHIP_DATA_URL", DEFAULT_URL)
    log_level: str = os.getenv("RIDERSHIP_LOG_LEVEL", "WARNING")
    timeout: int = int(os.getenv("RIDERSHIP_TIMEOUT", "30"))


settings = Settings()
