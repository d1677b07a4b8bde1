"""Pytest configuration and fixtures."""

import pytest

from aliasurls.core.config import RoutingConfig
from aliasurls.routing import AliasUrlProvider, DomainRegistry, UriNormalizer
from tests.fakes import InMemoryContentStore, RecordingDomainRegistry


@pytest.fixture
def store() -> InMemoryContentStore:
    """Provide a content tree: 1 (root) > 2 > 3 > 4."""
    content = InMemoryContentStore()
    content.add(1)
    content.add(2, 1)
    content.add(3, 2)
    content.add(4, 3, urlAlias="foo")
    return content


@pytest.fixture
def domains() -> RecordingDomainRegistry:
    """Provide an empty recording domain registry."""
    return RecordingDomainRegistry()


@pytest.fixture
def domain_registry() -> DomainRegistry:
    """Provide an empty DomainRegistry."""
    return DomainRegistry()


@pytest.fixture
def normalizer() -> UriNormalizer:
    """Provide a normalizer with default routing config."""
    return UriNormalizer(RoutingConfig())


@pytest.fixture
def provider(
    store: InMemoryContentStore,
    domains: RecordingDomainRegistry,
    normalizer: UriNormalizer,
) -> AliasUrlProvider:
    """Provide an enabled AliasUrlProvider over the fakes."""
    return AliasUrlProvider(store, domains, normalizer, enabled=True)
