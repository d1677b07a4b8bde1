"""URL provider for the alias attribute.

Note: alias values are used verbatim. Nothing validates or escapes them
beyond the normalization pass, and nothing stops two nodes from claiming
the same alias. An alias of "/" on a node with no domain above it yields the
site-relative URL "//", which browsers read as protocol-relative.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.types import URL_ALIAS_ATTRIBUTE
from .paths import combine_paths, left_part_path

if TYPE_CHECKING:
    from ..app.protocols import (
        ContentStoreProtocol,
        DomainRegistryProtocol,
        PublishedNodeProtocol,
        UriNormalizerProtocol,
    )
    from ..core.types import DomainAndUri


class AliasUrlProvider:
    """Provide other URLs for a node from its alias attribute.

    The provider never proposes a primary URL. Alternate URLs are built
    from the alias under each domain of the node's nearest ancestor with
    domains (the node itself included), or as a site-relative path when no
    ancestor has domains.

    Example:
        provider = AliasUrlProvider(store, domains, UriNormalizer(), enabled=True)
        provider.alternate_urls(1234, "https://example.com/")
        # ["https://example.com/my-alt-page"]
    """

    def __init__(
        self,
        store: "ContentStoreProtocol",
        domains: "DomainRegistryProtocol",
        normalizer: "UriNormalizerProtocol",
        enabled: bool = False,
        attribute: str = URL_ALIAS_ATTRIBUTE,
    ):
        """Initialize AliasUrlProvider.

        Args:
            store: Published content lookup.
            domains: Domain mappings per node.
            normalizer: Public URL normalization pass.
            enabled: Whether alias URLs are routed by the host. Computed
                once by the host, see alias_lookup_enabled().
            attribute: Name of the alias attribute.
        """
        self._store = store
        self._domains = domains
        self._normalizer = normalizer
        self._enabled = enabled
        self._attribute = attribute

    @property
    def enabled(self) -> bool:
        return self._enabled

    def primary_url(
        self,
        node_id: int,
        current: str,
        absolute: bool = False,
    ) -> str | None:
        """Always None: the primary URL belongs to other providers."""
        return None

    def alternate_urls(self, node_id: int, current: str) -> list[str]:
        """Get the alias URLs of a node.

        Args:
            node_id: Identifier of an existing published node.
            current: Absolute URI of the current request.

        Returns:
            One URL per domain of the nearest node with domains, a single
            site-relative URL when there are none, or an empty list when the
            feature is disabled or the node has no alias.
        """
        if not self._enabled:
            return []

        node = self._store.get_node_by_id(node_id)
        alias = None
        if node.has_attribute(self._attribute):
            alias = node.get_attribute(self._attribute)
        if not alias or not alias.strip():
            return []

        path = "/" + alias
        domains = self._find_domains(node, current)

        if domains is None:
            logger.debug(f"No domains above node {node_id}, alias path {path!r}")
            return [self._normalizer.normalize(path)]

        urls = [
            self._normalizer.normalize(combine_paths(left_part_path(d.uri), path))
            for d in domains
        ]
        logger.debug(f"Alias URLs for node {node_id}: {urls}")
        return urls

    def _find_domains(
        self,
        node: "PublishedNodeProtocol",
        current: str,
    ) -> "list[DomainAndUri] | None":
        """Walk up from the node to the first one with domains."""
        n: "PublishedNodeProtocol | None" = node
        while n is not None:
            domains = self._domains.domains_for_node(n.id, current)
            if domains is not None:
                return domains
            n = n.parent
        return None
