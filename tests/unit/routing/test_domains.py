"""Tests for DomainRegistry and domain parsing."""

import pytest

from aliasurls.app.protocols import DomainRegistryProtocol
from aliasurls.core.exceptions import InvalidDomainError
from aliasurls.core.types import DomainAndUri
from aliasurls.routing.domains import (
    DomainRegistry,
    is_wildcard_domain,
    parse_domain_uri,
)


class TestParseDomainUri:
    """Tests for parse_domain_uri()."""

    def test_name_without_scheme_takes_request_scheme(self):
        """Scheme-less names use the current request's scheme."""
        domain = parse_domain_uri("site.example/en", "https://other.example/x")

        assert domain == DomainAndUri("site.example/en", "https://site.example/en")

    def test_name_with_scheme_used_as_is(self):
        """Names with a scheme are not rewritten."""
        domain = parse_domain_uri("http://site.example", "https://other.example/")

        assert domain.uri == "http://site.example"

    def test_path_name_relative_to_request_authority(self):
        """Names starting with "/" hang off the current host and port."""
        domain = parse_domain_uri("/en", "https://site.example:8443/page")

        assert domain.uri == "https://site.example:8443/en"

    def test_name_is_trimmed(self):
        """Surrounding whitespace is ignored."""
        domain = parse_domain_uri("  site.example ", "http://x.example/")

        assert domain.name == "site.example"
        assert domain.uri == "http://site.example"

    def test_relative_request_defaults_to_http(self):
        """Without a request scheme, http is assumed."""
        assert parse_domain_uri("site.example", "/page").uri == "http://site.example"

    def test_empty_name_raises(self):
        """Empty names are rejected."""
        with pytest.raises(InvalidDomainError, match="empty domain name"):
            parse_domain_uri("   ", "http://site.example/")

    def test_path_name_without_request_host_raises(self):
        """A path-only name needs a current host."""
        with pytest.raises(InvalidDomainError) as exc_info:
            parse_domain_uri("/en", "/page")

        assert exc_info.value.domain_name == "/en"


class TestIsWildcardDomain:
    """Tests for is_wildcard_domain()."""

    def test_wildcard(self):
        assert is_wildcard_domain("*1234")

    def test_regular(self):
        assert not is_wildcard_domain("site.example")


class TestDomainRegistry:
    """Tests for DomainRegistry."""

    def test_implements_protocol(self, domain_registry: DomainRegistry):
        """DomainRegistry satisfies DomainRegistryProtocol."""
        assert isinstance(domain_registry, DomainRegistryProtocol)

    def test_unknown_node_returns_none(self, domain_registry: DomainRegistry):
        """Nodes without domains yield None, not an empty list."""
        assert domain_registry.domains_for_node(1, "http://site.example/") is None

    def test_registration_order_kept(self, domain_registry: DomainRegistry):
        """Domains not on the current host keep registration order."""
        domain_registry.register(1, "b.example")
        domain_registry.register(1, "a.example")

        domains = domain_registry.domains_for_node(1, "http://other.example/")

        assert [d.uri for d in domains] == ["http://b.example", "http://a.example"]

    def test_current_host_first(self, domain_registry: DomainRegistry):
        """Domains on the current host come first."""
        domain_registry.register(1, "a.example")
        domain_registry.register(1, "b.example/x")
        domain_registry.register(1, "c.example")
        domain_registry.register(1, "B.example/y")

        domains = domain_registry.domains_for_node(1, "https://b.example/page")

        assert [d.name for d in domains] == [
            "b.example/x",
            "B.example/y",
            "a.example",
            "c.example",
        ]

    def test_only_exact_node(self, domain_registry: DomainRegistry):
        """Domains of other nodes are not returned."""
        domain_registry.register(1, "a.example")

        assert domain_registry.domains_for_node(2, "http://a.example/") is None

    def test_wildcard_domains_ignored(self, domain_registry: DomainRegistry):
        """Wildcard domains are stored but never returned."""
        domain_registry.register(1, "*1")

        assert domain_registry.domains_for_node(1, "http://a.example/") is None
        assert not domain_registry.has_domains(1)

        domain_registry.register(1, "a.example")

        assert domain_registry.has_domains(1)
        assert len(domain_registry.domains_for_node(1, "http://a.example/")) == 1

    def test_duplicate_registration_ignored(self, domain_registry: DomainRegistry):
        """Registering the same name twice keeps one entry."""
        domain_registry.register(1, "a.example")
        domain_registry.register(1, " a.example ")

        assert len(domain_registry.domains_for_node(1, "http://a.example/")) == 1

    def test_register_empty_raises(self, domain_registry: DomainRegistry):
        """Empty names cannot be registered."""
        with pytest.raises(InvalidDomainError):
            domain_registry.register(1, "")

    @pytest.mark.parametrize("name", ["http://", "https:///en", "https://?x=1"])
    def test_register_without_host_raises(
        self, domain_registry: DomainRegistry, name: str
    ):
        """Names that can never resolve to a host are rejected up front."""
        with pytest.raises(InvalidDomainError, match="no host"):
            domain_registry.register(1, name)

        assert domain_registry.domains_for_node(1, "https://a.example/") is None

    def test_register_path_and_wildcard_names(
        self, domain_registry: DomainRegistry
    ):
        """Path-only and wildcard names are accepted without a host."""
        domain_registry.register(1, "/en")
        domain_registry.register(1, "*1")

        domains = domain_registry.domains_for_node(1, "https://a.example/")

        assert [d.uri for d in domains] == ["https://a.example/en"]

    def test_unregister(self, domain_registry: DomainRegistry):
        """Unregistering removes the name and reports whether it existed."""
        domain_registry.register(1, "a.example")

        assert domain_registry.unregister(1, "a.example") is True
        assert domain_registry.unregister(1, "a.example") is False
        assert domain_registry.domains_for_node(1, "http://a.example/") is None

    def test_unregister_strips_name(self, domain_registry: DomainRegistry):
        """Unregister matches names the way register stores them."""
        domain_registry.register(1, " a.example ")

        assert domain_registry.unregister(1, " a.example ") is True
        assert domain_registry.domains_for_node(1, "http://a.example/") is None

    def test_has_domains(self, domain_registry: DomainRegistry):
        """has_domains reflects registrations for exactly that node."""
        assert domain_registry.has_domains(1) is False

        domain_registry.register(1, "a.example")

        assert domain_registry.has_domains(1) is True
        assert domain_registry.has_domains(2) is False

        domain_registry.unregister(1, "a.example")

        assert domain_registry.has_domains(1) is False

    def test_clear(self, domain_registry: DomainRegistry):
        """Clear removes everything."""
        domain_registry.register(1, "a.example")
        domain_registry.register(2, "b.example")

        domain_registry.clear()

        assert not domain_registry.has_domains(1)
        assert not domain_registry.has_domains(2)
