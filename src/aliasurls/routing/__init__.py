"""URL resolution for content nodes.

Example:
    from aliasurls.routing import AliasUrlProvider, DomainRegistry, UriNormalizer

    domains = DomainRegistry()
    domains.register(1000, "example.com")

    provider = AliasUrlProvider(store, domains, UriNormalizer(), enabled=True)
    provider.alternate_urls(1234, "https://example.com/")
"""

from .alias_provider import AliasUrlProvider
from .domains import DomainRegistry, is_wildcard_domain, parse_domain_uri
from .finders import (
    AliasContentFinder,
    ContentFinderRegistry,
    NotFoundHandlersFinder,
    SearchForAliasHandler,
    alias_lookup_enabled,
    find_by_alias,
)
from .paths import combine_paths, left_part_path
from .pipeline import UrlProviderPipeline
from .uri_utility import UriNormalizer

__all__ = [
    "AliasUrlProvider",
    "DomainRegistry",
    "is_wildcard_domain",
    "parse_domain_uri",
    "AliasContentFinder",
    "ContentFinderRegistry",
    "NotFoundHandlersFinder",
    "SearchForAliasHandler",
    "alias_lookup_enabled",
    "find_by_alias",
    "combine_paths",
    "left_part_path",
    "UrlProviderPipeline",
    "UriNormalizer",
]
