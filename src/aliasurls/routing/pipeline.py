"""Polling of several URL providers for a node."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ..app.protocols import UrlProviderProtocol


class UrlProviderPipeline:
    """Ask each URL provider in turn.

    The first provider with a primary URL wins. Alternate URLs from all
    providers are concatenated in provider order. A provider that raises
    is logged and skipped so the others still contribute.

    Example:
        pipeline = UrlProviderPipeline([canonical_provider, alias_provider])
        pipeline.primary_url(1234, "https://example.com/")
        pipeline.alternate_urls(1234, "https://example.com/")
    """

    def __init__(self, providers: list["UrlProviderProtocol"]):
        """Initialize pipeline.

        Args:
            providers: URL providers in priority order.
        """
        self._providers = list(providers)

    @property
    def providers(self) -> list["UrlProviderProtocol"]:
        return list(self._providers)

    def primary_url(
        self,
        node_id: int,
        current: str,
        absolute: bool = False,
    ) -> str | None:
        """Get the first primary URL any provider proposes."""
        for provider in self._providers:
            try:
                url = provider.primary_url(node_id, current, absolute)
            except Exception as e:
                logger.warning(
                    f"URL provider {type(provider).__name__} failed for node "
                    f"{node_id}: {e}"
                )
                continue
            if url is not None:
                return url
        logger.debug(f"No provider has a primary URL for node {node_id}")
        return None

    def alternate_urls(self, node_id: int, current: str) -> list[str]:
        """Get alternate URLs from every provider."""
        urls: list[str] = []
        for provider in self._providers:
            try:
                urls.extend(provider.alternate_urls(node_id, current))
            except Exception as e:
                logger.warning(
                    f"URL provider {type(provider).__name__} failed for node "
                    f"{node_id}: {e}"
                )
        return urls
