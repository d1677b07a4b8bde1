"""Type definitions for aliasurls."""

from dataclasses import dataclass

# Name of the node attribute holding alternate path fragments.
URL_ALIAS_ATTRIBUTE = "urlAlias"


@dataclass(frozen=True)
class DomainAndUri:
    """A domain registered against a node, resolved to a base URI.

    Attributes:
        name: Domain name as configured (e.g. "example.com/en").
        uri: Absolute base URI the name resolves to for the current request
            (e.g. "https://example.com/en").
    """

    name: str
    uri: str

    def __str__(self) -> str:
        """Convert to string representation."""
        return f"{self.name} -> {self.uri}"
