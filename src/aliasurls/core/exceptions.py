"""Custom exceptions for aliasurls."""


class AliasUrlsError(Exception):
    """Base exception for all aliasurls errors."""

    pass


class ConfigError(AliasUrlsError):
    """Configuration file or value is invalid."""

    pass


class RegistryError(AliasUrlsError):
    """Content finder registration failed."""

    pass


class InvalidDomainError(AliasUrlsError):
    """Domain name cannot be turned into a base URI."""

    def __init__(self, domain_name: str, reason: str = "empty domain name"):
        """Initialize exception with the offending domain name.

        Args:
            domain_name: The domain name as registered.
            reason: Why the name could not be parsed.
        """
        self.domain_name = domain_name
        self.reason = reason
        super().__init__(f"Invalid domain {domain_name!r}: {reason}")


class NodeNotFoundError(AliasUrlsError):
    """Content node does not exist in the store."""

    def __init__(self, node_id: int):
        """Initialize exception with the missing node id.

        Args:
            node_id: Identifier that did not resolve to a node.
        """
        self.node_id = node_id
        super().__init__(f"Content node not found: {node_id}")
