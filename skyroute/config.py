"""
Skyroute Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration loaded from environment variables."""

    # Network sizing
    # Cities past the cap are dropped at build time.
    MAX_CITIES: int = int(os.getenv("SKYROUTE_MAX_CITIES", "50"))

    # Console output
    VERBOSE: bool = _env_flag("SKYROUTE_VERBOSE", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.MAX_CITIES < 1:
            raise ValueError(
                f"SKYROUTE_MAX_CITIES must be at least 1 (got {cls.MAX_CITIES})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Skyroute Configuration:",
            f"  Max Cities: {cls.MAX_CITIES}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
