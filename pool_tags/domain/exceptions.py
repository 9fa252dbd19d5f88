from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UnsupportedChainError(DomainError):
    """Chain id is not numeric or has no known subgraph."""


class SubgraphError(DomainError):
    """Subgraph request failed."""


class SubgraphHttpError(SubgraphError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! Status: {status_code}")
        self.status_code = status_code


class SubgraphGraphQLError(SubgraphError):
    def __init__(self, messages: list[str]):
        super().__init__("GraphQL errors occurred: see logs for details.")
        self.messages = messages


class SubgraphNoDataError(SubgraphError):
    """Response carried no pools payload."""


class TagFetchError(DomainError):
    """Tag list could not be built for the chain."""


class UnknownFetchError(TagFetchError):
    """Tag fetch failed with an unrecognized error."""
