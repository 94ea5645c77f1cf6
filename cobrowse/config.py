"""Configuration loaded from the environment (.env supported)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 5001
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_REQUEST_TIMEOUT = 60.0


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""
    pass


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class AppConfig:
    """Typed configuration for the relay server."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT
    # Empty means reflect any origin (dev setup)
    cors_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            request_timeout_seconds=float(
                os.getenv("REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT))
            ),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "")),
        )

    def require_api_key(self) -> str:
        if not self.gemini_api_key:
            raise ConfigurationError(
                "Gemini API key is not configured. Please set GEMINI_API_KEY in your .env file"
            )
        return self.gemini_api_key
