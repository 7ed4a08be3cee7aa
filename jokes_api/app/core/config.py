"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first with ``python-dotenv`` so local deployments can keep the
master key and port out of the shell environment.  Defaults are
provided for all fields.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Jokes API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Shared secret required by every mutating endpoint.  When empty all
    # create, update and delete requests are rejected with 403.
    master_key: str = os.getenv("MASTER_KEY", "")

    # Externally visible base URL (set by Render).  Advertised in the
    # OpenAPI ``servers`` list when present.
    public_url: str = os.getenv("RENDER_EXTERNAL_URL", "")

    @property
    def server_url(self) -> str:
        """Base URL advertised in the API documentation."""
        return self.public_url or f"http://localhost:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
