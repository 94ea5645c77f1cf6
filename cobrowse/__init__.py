"""Cobrowse Relay — chat relay that turns model replies into page actions."""

from cobrowse.config import __version__, AppConfig, ConfigurationError
from cobrowse.domain.relay import ChatRelay

__all__ = [
    "__version__",
    "AppConfig",
    "ConfigurationError",
    "ChatRelay",
]
