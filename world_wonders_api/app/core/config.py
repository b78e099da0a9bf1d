"""
Configuration for the World Wonders API.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Two
environments are recognised: ``dev`` (the default, listening on the
loopback interface with verbose logging) and ``prod`` (listening on
all interfaces, ``INFO`` logging).  Any explicitly set variable wins
over the environment's defaults.

``APP_ENV``, ``APP_HOST``, ``APP_PORT``, ``LOG_LEVEL`` and
``WONDERS_DATA_FILE`` are the variables most deployments touch;
``RATE_LIMIT`` and ``REQUEST_TIMEOUT`` tune request handling.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from limits import parse_many

ENVIRONMENTS = {"dev", "prod"}

# Level names understood by both the logging module and Uvicorn
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

# Bundled dataset shipped inside the package
DEFAULT_DATA_FILE = str(Path(__file__).resolve().parent.parent / "data" / "wonders.json")

_ENV_DEFAULTS = {
    "dev": {"host": "127.0.0.1", "log_level": "DEBUG"},
    "prod": {"host": "0.0.0.0", "log_level": "INFO"},
}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "World Wonders API")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    environment: str = os.getenv("APP_ENV", "dev")
    # Left empty to pick the environment's default
    host: str = os.getenv("APP_HOST", "")
    port: int = int(os.getenv("APP_PORT", "8138"))
    log_level: str = os.getenv("LOG_LEVEL", "")
    # Optional file to mirror log output to
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the JSON document holding the wonders.  Overriding it is
    # mostly useful for tests and for trying out dataset changes.
    data_file: str = os.getenv("WONDERS_DATA_FILE", DEFAULT_DATA_FILE)

    # Per-client limit on each wonder route, in ``limits`` notation
    rate_limit: str = os.getenv("RATE_LIMIT", "10 per 2 seconds")
    # Seconds a request may take before it is answered with 408
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10"))

    def __post_init__(self) -> None:
        self.environment = self.environment.strip().lower()
        defaults = _ENV_DEFAULTS.get(self.environment, _ENV_DEFAULTS["dev"])
        if not self.host:
            self.host = defaults["host"]
        if not self.log_level:
            self.log_level = defaults["log_level"]

    def validate(self) -> "Settings":
        """Check that the settings describe a usable server.

        Raises ``ValueError`` naming the offending value.  Returns the
        settings themselves so the call can be chained.
        """
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{self.environment}': expected one of {sorted(ENVIRONMENTS)}"
            )
        parts = self.host.split(".")
        if len(parts) != 4:
            raise ValueError(
                f"Invalid host '{self.host}': value needs to be provided in the format "
                "'0.0.0.0', with 4 period-separated numbers between 0 and 255"
            )
        for part in parts:
            if not part.isdigit() or int(part) > 255:
                raise ValueError(
                    f"Invalid host '{self.host}': '{part}' is not a number between 0 and 255"
                )
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port {self.port}: expected a number between 1 and 65535")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}': expected one of {sorted(LOG_LEVELS)}"
            )
        try:
            parse_many(self.rate_limit)
        except ValueError as e:
            raise ValueError(f"Invalid rate limit '{self.rate_limit}': {e}") from e
        if self.request_timeout <= 0:
            raise ValueError(
                f"Invalid request timeout {self.request_timeout}: expected a positive number of seconds"
            )
        return self


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
