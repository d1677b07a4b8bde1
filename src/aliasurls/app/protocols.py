"""Protocol definitions for the aliasurls collaborators.

The alias provider reads content and domain data owned by the host content
management system. This module defines the read-only interfaces it depends
on, so the provider can be wired to any store and tested with in-memory
fakes.

Protocols are organized by role:
- Content: node lookup and attribute access
- Domains: per-node domain mappings
- Routing: URI normalization, content finders and the URL provider contract

Example:
    class MyStore:
        def get_node_by_id(self, node_id: int) -> MyNode:
            ...

    store: ContentStoreProtocol = MyStore()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import DomainAndUri


# =============================================================================
# Content Protocols
# =============================================================================


@runtime_checkable
class PublishedNodeProtocol(Protocol):
    """A node of the published content tree."""

    @property
    def id(self) -> int:
        """Stable node identifier."""
        ...

    @property
    def parent(self) -> "PublishedNodeProtocol | None":
        """Parent node, or None for a root."""
        ...

    def has_attribute(self, name: str) -> bool:
        """Check whether the node carries the named attribute."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Get the value of the named attribute."""
        ...


@runtime_checkable
class ContentStoreProtocol(Protocol):
    """Lookup of nodes in the current published content snapshot."""

    def get_node_by_id(self, node_id: int) -> PublishedNodeProtocol:
        """Get a node by identifier.

        Implementations decide how a missing node is signalled; callers
        in this package let that signal propagate.
        """
        ...


@runtime_checkable
class IterableContentStoreProtocol(ContentStoreProtocol, Protocol):
    """Content store that can enumerate its nodes."""

    def iter_nodes(self) -> Iterator[PublishedNodeProtocol]:
        """Iterate over every published node, parents before children."""
        ...


# =============================================================================
# Domain Protocols
# =============================================================================


@runtime_checkable
class DomainRegistryProtocol(Protocol):
    """Domain mappings registered against content nodes."""

    def domains_for_node(
        self,
        node_id: int,
        current: str,
    ) -> list["DomainAndUri"] | None:
        """Get the domains registered for exactly this node.

        Args:
            node_id: Node identifier. Ancestors are not consulted.
            current: Absolute URI of the current request.

        Returns:
            Domains ordered by relevance to the current request, or None if
            the node has no domains.
        """
        ...


# =============================================================================
# Routing Protocols
# =============================================================================


@runtime_checkable
class UriNormalizerProtocol(Protocol):
    """The host's public URL normalization pass."""

    def normalize(self, uri: str) -> str:
        """Normalize an absolute URI or site-relative path for public use."""
        ...


@runtime_checkable
class ContentFinderProtocol(Protocol):
    """Maps an inbound request path to a node."""

    def find(self, path: str) -> PublishedNodeProtocol | None:
        """Find the node for a request path, or None."""
        ...


@runtime_checkable
class UrlProviderProtocol(Protocol):
    """A source of URLs for content nodes.

    The host polls several providers: the first non-None primary URL wins,
    and alternate URLs from every provider are concatenated.
    """

    def primary_url(
        self,
        node_id: int,
        current: str,
        absolute: bool = False,
    ) -> str | None:
        """Get the primary URL of a node, or None to abstain."""
        ...

    def alternate_urls(self, node_id: int, current: str) -> list[str]:
        """Get other URLs that also resolve to the node."""
        ...
