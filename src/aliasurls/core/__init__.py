"""Core configuration, types and exceptions for aliasurls."""

from .config import Config, RoutingConfig
from .exceptions import (
    AliasUrlsError,
    ConfigError,
    InvalidDomainError,
    NodeNotFoundError,
    RegistryError,
)
from .types import URL_ALIAS_ATTRIBUTE, DomainAndUri

__all__ = [
    "Config",
    "RoutingConfig",
    "AliasUrlsError",
    "ConfigError",
    "InvalidDomainError",
    "NodeNotFoundError",
    "RegistryError",
    "URL_ALIAS_ATTRIBUTE",
    "DomainAndUri",
]
