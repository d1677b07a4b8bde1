"""Test fakes for testing without a content management system.

This module provides in-memory implementations of the content store,
domain registry and URL provider protocols.

Example:
    from tests.fakes import InMemoryContentStore, RecordingDomainRegistry

    store = InMemoryContentStore()
    store.add(1, urlAlias="my-alt-page")

    provider = AliasUrlProvider(
        store, RecordingDomainRegistry(), UriNormalizer(), enabled=True
    )
"""

from .content import (
    FailingDomainRegistry,
    FakeNode,
    InMemoryContentStore,
    RecordingDomainRegistry,
    StubUrlProvider,
)

__all__ = [
    "FailingDomainRegistry",
    "FakeNode",
    "InMemoryContentStore",
    "RecordingDomainRegistry",
    "StubUrlProvider",
]
