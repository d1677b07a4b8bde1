"""Composition root for the alias URL provider.

Example:
    from aliasurls.app import create_alias_provider
    from aliasurls.core.config import Config

    provider = create_alias_provider(Config.from_env(), store, domains, finders)
    provider.alternate_urls(1234, "https://example.com/")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..routing.alias_provider import AliasUrlProvider
from ..routing.finders import alias_lookup_enabled
from ..routing.uri_utility import UriNormalizer

if TYPE_CHECKING:
    from ..core.config import Config
    from ..routing.finders import ContentFinderRegistry
    from .protocols import ContentStoreProtocol, DomainRegistryProtocol


def create_alias_provider(
    config: "Config",
    store: "ContentStoreProtocol",
    domains: "DomainRegistryProtocol",
    finders: "ContentFinderRegistry | None" = None,
) -> AliasUrlProvider:
    """Create an AliasUrlProvider wired from configuration.

    The feature gate is read from the finder registry when one is given,
    otherwise from config.alias_lookup_enabled.

    Args:
        config: Application configuration.
        store: Published content lookup.
        domains: Domain mappings per node.
        finders: The host's content finder registry.

    Returns:
        Configured AliasUrlProvider.
    """
    if finders is not None:
        enabled = alias_lookup_enabled(finders)
    else:
        enabled = config.alias_lookup_enabled

    logger.debug(f"Creating alias URL provider (enabled={enabled})")

    return AliasUrlProvider(
        store,
        domains,
        UriNormalizer(config.routing),
        enabled=enabled,
        attribute=config.routing.url_alias_attribute,
    )
