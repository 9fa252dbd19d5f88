from __future__ import annotations

from types import MappingProxyType
from urllib.parse import quote

from pool_tags.domain.exceptions import UnsupportedChainError


API_KEY_PLACEHOLDER = "[api-key]"
GATEWAY_TEMPLATE = (
    "https://gateway-arbitrum.network.thegraph.com/api/"
    f"{API_KEY_PLACEHOLDER}/subgraphs/id/{{deployment_id}}"
)

SUBGRAPH_URLS = MappingProxyType(
    {
        "1": GATEWAY_TEMPLATE.format(deployment_id="5zvR82QoaXYFyDEKLZ9t6v9adgnptxYpKpSbxtgVENFV"),
        "137": GATEWAY_TEMPLATE.format(deployment_id="3hCPRGf4z88VC5rsBKU5AA9FBBq5nF3jbKJG7VZCbhjm"),
        "10": GATEWAY_TEMPLATE.format(deployment_id="Cghf4LfVqPiFw6fp6Y5X5Ubc8UpmUhSfJL82zwiBFLaj"),
        "42220": GATEWAY_TEMPLATE.format(deployment_id="ESdrTJ3twMwWVoQ1hUE2u7PugEHX3QkenudD6aXCkDQ4"),
    }
)


def resolve_subgraph_url(chain_id: str, api_key: str) -> str:
    template = SUBGRAPH_URLS.get(chain_id) if chain_id.isdigit() else None
    if template is None:
        raise UnsupportedChainError(
            f"Unsupported or invalid Chain ID provided: {chain_id}. "
            f"Only the following values are accepted: {', '.join(SUBGRAPH_URLS)}"
        )
    return template.replace(API_KEY_PLACEHOLDER, quote(api_key, safe="!*'()"))
