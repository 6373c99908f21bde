"""
Configuration management for the glossary action.

Loads environment variables from .env file and provides typed access to configuration.
Action inputs (project, bucket, languages...) are NOT configuration; they come
from the CI runtime. This only holds deployment-level knobs whose defaults
match the production Translation API.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the glossary action."""

    # Translation API
    TRANSLATION_API_BASE_URL = os.getenv(
        "TRANSLATION_API_BASE_URL", "https://translation.googleapis.com/v3/"
    )
    GLOSSARY_LOCATION = os.getenv("GLOSSARY_LOCATION", "us-central1")

    # Transport (httpx default)
    HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "5.0"))

    # Upper bound for the wait-time input
    MAX_WAIT_TIME_S = int(os.getenv("MAX_WAIT_TIME_S", "300"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

    @classmethod
    def validate(cls) -> bool:
        """Validate that configuration overrides are usable."""
        problems = []
        if not cls.TRANSLATION_API_BASE_URL.startswith("http"):
            problems.append("TRANSLATION_API_BASE_URL must be an http(s) URL")
        if not cls.TRANSLATION_API_BASE_URL.endswith("/"):
            problems.append("TRANSLATION_API_BASE_URL must end with '/'")
        if not cls.GLOSSARY_LOCATION:
            problems.append("GLOSSARY_LOCATION must not be empty")
        if cls.MAX_WAIT_TIME_S < 0:
            problems.append("MAX_WAIT_TIME_S must not be negative")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            problems.append(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a logging level")

        if problems:
            print(f"⚠️  Invalid configuration: {'; '.join(problems)}")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  API Base URL: {Config.TRANSLATION_API_BASE_URL}")
    print(f"  Location: {Config.GLOSSARY_LOCATION}")
    print(f"  HTTP Timeout: {Config.HTTP_TIMEOUT_S}s")
    print(f"  Max Wait Time: {Config.MAX_WAIT_TIME_S}s")
    print(f"  Log Level: {Config.LOG_LEVEL}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
