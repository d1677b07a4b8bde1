"""Domain mappings for content nodes.

A domain maps a node (usually a site root) to the hosts it is served on.
Names are stored as configured, e.g. "example.com", "example.com/en",
"https://example.com" or "/en", and are resolved against the current
request when they are read.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from loguru import logger

from ..core.exceptions import InvalidDomainError
from ..core.types import DomainAndUri


def is_wildcard_domain(name: str) -> bool:
    """Check whether a domain name is a wildcard (culture-only) domain."""
    return name.startswith("*")


def parse_domain_uri(name: str, current: str) -> DomainAndUri:
    """Resolve a domain name to an absolute base URI.

    - "/en" is relative to the current request's authority.
    - "example.com/en" takes the current request's scheme.
    - "https://example.com/en" is used as is.

    Args:
        name: Domain name as registered.
        current: Absolute URI of the current request.

    Returns:
        DomainAndUri pairing the name with its base URI.

    Raises:
        InvalidDomainError: If the name is empty or resolves to no host.
    """
    name = name.strip()
    if not name:
        raise InvalidDomainError(name)

    request = urlsplit(current)
    scheme = request.scheme or "http"

    if name.startswith("/"):
        uri = f"{scheme}://{request.netloc}{name}"
    elif "://" in name:
        uri = name
    else:
        uri = f"{scheme}://{name}"

    if not urlsplit(uri).netloc:
        raise InvalidDomainError(name, f"no host for current request {current!r}")

    return DomainAndUri(name=name, uri=uri)


class DomainRegistry:
    """Registry of domain names per content node.

    Example:
        domains = DomainRegistry()
        domains.register(1000, "example.com")
        domains.register(1000, "example.org")

        domains.domains_for_node(1000, "https://example.org/page")
        # [DomainAndUri("example.org", "https://example.org"),
        #  DomainAndUri("example.com", "https://example.com")]
        domains.domains_for_node(1001, "https://example.org/page")  # None
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._domains: dict[int, list[str]] = {}

    def register(self, node_id: int, name: str) -> None:
        """Register a domain name for a node.

        Args:
            node_id: Node the domain points at.
            name: Domain name, or a "*"-prefixed wildcard domain.

        Raises:
            InvalidDomainError: If the name is empty or names no host.
        """
        name = name.strip()
        if not name:
            raise InvalidDomainError(name)
        if not is_wildcard_domain(name) and not name.startswith("/"):
            uri = name if "://" in name else "http://" + name
            if not urlsplit(uri).netloc:
                raise InvalidDomainError(name, "no host")
        names = self._domains.setdefault(node_id, [])
        if name in names:
            logger.warning(f"Domain {name!r} already registered for node {node_id}")
            return
        names.append(name)
        logger.debug(f"Registered domain {name!r} for node {node_id}")

    def unregister(self, node_id: int, name: str) -> bool:
        """Remove a domain name from a node.

        Returns:
            True if the name was registered and removed, False if not found.
        """
        name = name.strip()
        names = self._domains.get(node_id, [])
        if name not in names:
            return False
        names.remove(name)
        if not names:
            del self._domains[node_id]
        logger.debug(f"Unregistered domain {name!r} for node {node_id}")
        return True

    def has_domains(self, node_id: int) -> bool:
        """Check if a node has any non-wildcard domain."""
        return any(
            not is_wildcard_domain(name) for name in self._domains.get(node_id, [])
        )

    def domains_for_node(self, node_id: int, current: str) -> list[DomainAndUri] | None:
        """Get the domains registered for exactly this node.

        Domains on the current request's host come first; registration
        order is kept otherwise.

        Args:
            node_id: Node identifier. Ancestors are not consulted.
            current: Absolute URI of the current request.

        Returns:
            Ordered domains, or None if the node has no non-wildcard domain.
        """
        names = [
            name for name in self._domains.get(node_id, [])
            if not is_wildcard_domain(name)
        ]
        if not names:
            return None

        host = urlsplit(current).hostname
        domains = [parse_domain_uri(name, current) for name in names]
        return sorted(domains, key=lambda d: urlsplit(d.uri).hostname != host)

    def clear(self) -> None:
        """Remove all registered domains."""
        self._domains.clear()
