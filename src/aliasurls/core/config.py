"""Configuration management for aliasurls."""

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .types import URL_ALIAS_ATTRIBUTE

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class RoutingConfig:
    """Public URL conventions shared with the canonical URL algorithm."""

    # Extension-less URLs ("/about") instead of legacy "/about.aspx"
    use_directory_urls: bool = True
    # Only applies when use_directory_urls is on
    add_trailing_slash: bool = False
    # Virtual path the site is mounted under, prefixed to site-relative URLs
    application_path: str = "/"
    legacy_extension: str = ".aspx"
    url_alias_attribute: str = URL_ALIAS_ATTRIBUTE


@dataclass
class Config:
    """Main application configuration."""

    routing: RoutingConfig = field(default_factory=RoutingConfig)
    # Alias URLs are opt-in
    alias_lookup_enabled: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Returns:
            Config with file values and environment overrides applied.

        Raises:
            ConfigError: If the file is not valid TOML or holds unknown keys
                or values of the wrong type.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        config = cls()
        routing = data.pop("routing", {})
        if not isinstance(routing, dict):
            raise ConfigError("[routing] must be a table")

        _apply_mapping(config, data, section="")
        _apply_mapping(config.routing, routing, section="routing.")
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, ALIASURLS_CONFIG, or the environment only."""
        if path is None:
            path = os.environ.get("ALIASURLS_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> None:
        if (value := os.environ.get("ALIASURLS_ENABLED")) is not None:
            self.alias_lookup_enabled = _parse_bool("ALIASURLS_ENABLED", value)

        if (value := os.environ.get("ALIASURLS_TRAILING_SLASH")) is not None:
            self.routing.add_trailing_slash = _parse_bool(
                "ALIASURLS_TRAILING_SLASH", value
            )

        if (value := os.environ.get("ALIASURLS_DIRECTORY_URLS")) is not None:
            self.routing.use_directory_urls = _parse_bool(
                "ALIASURLS_DIRECTORY_URLS", value
            )

        if path := os.environ.get("ALIASURLS_APP_PATH"):
            self.routing.application_path = path

        if attribute := os.environ.get("ALIASURLS_ALIAS_ATTRIBUTE"):
            self.routing.url_alias_attribute = attribute


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _apply_mapping(target: Any, values: dict[str, Any], section: str) -> None:
    """Copy TOML values onto a config dataclass, checking names and types."""
    known = {f.name for f in fields(target)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown configuration key: {section}{key}")
        current = getattr(target, key)
        if type(value) is not type(current):
            raise ConfigError(
                f"{section}{key} must be {type(current).__name__}, "
                f"got {type(value).__name__}"
            )
        setattr(target, key, value)
