"""Protocol ports and composition root.

This module provides:
- Protocol definitions for the host collaborators (protocols.py)
- Factory functions for creating configured providers (factory.py)
"""

from .factory import create_alias_provider
from .protocols import (
    ContentFinderProtocol,
    ContentStoreProtocol,
    DomainRegistryProtocol,
    IterableContentStoreProtocol,
    PublishedNodeProtocol,
    UriNormalizerProtocol,
    UrlProviderProtocol,
)

__all__ = [
    "create_alias_provider",
    "ContentFinderProtocol",
    "ContentStoreProtocol",
    "DomainRegistryProtocol",
    "IterableContentStoreProtocol",
    "PublishedNodeProtocol",
    "UriNormalizerProtocol",
    "UrlProviderProtocol",
]
