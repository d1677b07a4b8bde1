"""Content finders and the alias feature gate.

Content finders map an inbound request path to a node. The host keeps them
in a ContentFinderRegistry and tries them in order. Alias URLs are only
worth advertising when something will route them back to the node, so the
alias provider is enabled from this registry: either the dedicated
AliasContentFinder is registered, or the legacy not-found handler chain
contains the alias handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from loguru import logger

from ..core.exceptions import RegistryError
from ..core.types import URL_ALIAS_ATTRIBUTE

if TYPE_CHECKING:
    from ..app.protocols import (
        ContentFinderProtocol,
        IterableContentStoreProtocol,
        PublishedNodeProtocol,
    )

F = TypeVar("F")


def find_by_alias(
    store: "IterableContentStoreProtocol",
    path: str,
    attribute: str = URL_ALIAS_ATTRIBUTE,
) -> "PublishedNodeProtocol | None":
    """Find the first node with an alias matching a request path.

    The attribute may hold several comma-separated aliases. Slashes around
    the path and each alias are ignored, and matching is case-insensitive.
    """
    target = path.strip().strip("/").lower()
    if not target:
        return None

    for node in store.iter_nodes():
        if not node.has_attribute(attribute):
            continue
        value = node.get_attribute(attribute) or ""
        for alias in value.split(","):
            if alias.strip().strip("/").lower() == target:
                logger.debug(f"Alias {path!r} matched node {node.id}")
                return node
    return None


class AliasContentFinder:
    """Find content by the alias attribute."""

    def __init__(
        self,
        store: "IterableContentStoreProtocol",
        attribute: str = URL_ALIAS_ATTRIBUTE,
    ) -> None:
        self._store = store
        self._attribute = attribute

    def find(self, path: str) -> "PublishedNodeProtocol | None":
        return find_by_alias(self._store, path, self._attribute)


class SearchForAliasHandler:
    """Legacy not-found handler that looks content up by alias."""

    def __init__(
        self,
        store: "IterableContentStoreProtocol",
        attribute: str = URL_ALIAS_ATTRIBUTE,
    ) -> None:
        self._store = store
        self._attribute = attribute

    def find(self, path: str) -> "PublishedNodeProtocol | None":
        return find_by_alias(self._store, path, self._attribute)


class NotFoundHandlersFinder:
    """Run the legacy not-found handler chain.

    Handlers are tried in order and the first node found wins.
    """

    def __init__(self, handlers: list["ContentFinderProtocol"] | None = None) -> None:
        self._handlers = list(handlers or [])

    @property
    def handlers(self) -> list["ContentFinderProtocol"]:
        return list(self._handlers)

    def contains_handler_type(self, handler_type: type) -> bool:
        return any(isinstance(h, handler_type) for h in self._handlers)

    def find(self, path: str) -> "PublishedNodeProtocol | None":
        for handler in self._handlers:
            node = handler.find(path)
            if node is not None:
                return node
        return None


class ContentFinderRegistry:
    """Ordered registry of content finders, at most one per type.

    Example:
        finders = ContentFinderRegistry()
        finders.register(AliasContentFinder(store))

        node = finders.find("/my-alt-page")
        alias_lookup_enabled(finders)  # True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._finders: list["ContentFinderProtocol"] = []

    def register(self, finder: "ContentFinderProtocol", override: bool = False) -> None:
        """Append a finder, or replace the registered finder of the same type.

        Args:
            finder: Finder instance.
            override: Replace an existing finder of the same type in place.

        Raises:
            RegistryError: If a finder of this type is registered and
                override is False.
        """
        finder_type = type(finder)
        for i, existing in enumerate(self._finders):
            if type(existing) is finder_type:
                if not override:
                    raise RegistryError(
                        f"Content finder {finder_type.__name__} already registered"
                    )
                logger.warning(f"Overwriting content finder {finder_type.__name__}")
                self._finders[i] = finder
                return
        self._finders.append(finder)
        logger.debug(f"Registered content finder: {finder_type.__name__}")

    def unregister(self, finder_type: type) -> bool:
        """Remove the finder of a type.

        Returns:
            True if a finder was removed, False if none was registered.
        """
        for i, existing in enumerate(self._finders):
            if type(existing) is finder_type:
                del self._finders[i]
                logger.debug(f"Unregistered content finder: {finder_type.__name__}")
                return True
        return False

    def contains_type(self, finder_type: type) -> bool:
        """Check if a finder of the given type is registered."""
        return any(type(f) is finder_type for f in self._finders)

    def get(self, finder_type: type[F]) -> F | None:
        """Get the registered finder of a type, if any."""
        for f in self._finders:
            if type(f) is finder_type:
                return f
        return None

    @property
    def finders(self) -> list["ContentFinderProtocol"]:
        """Registered finders in lookup order."""
        return list(self._finders)

    def find(self, path: str) -> "PublishedNodeProtocol | None":
        """Try each finder in order and return the first node found."""
        for finder in self._finders:
            node = finder.find(path)
            if node is not None:
                return node
        logger.debug(f"No content finder matched {path!r}")
        return None


def alias_lookup_enabled(registry: ContentFinderRegistry) -> bool:
    """Check whether requests for alias URLs will be routed to content.

    True when an AliasContentFinder is registered, or when the legacy
    not-found handler chain includes SearchForAliasHandler.
    """
    if registry.contains_type(AliasContentFinder):
        return True
    handlers = registry.get(NotFoundHandlersFinder)
    return handlers is not None and handlers.contains_handler_type(SearchForAliasHandler)
