from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from pool_tags.application.ports.tag_service_port import TagServicePort
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.infrastructure.clients.uniswap_v3_subgraph_client import (
    UniswapV3SubgraphClient,
    UniswapV3SubgraphClientSettings,
)
from pool_tags.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_uniswap_v3_subgraph_client() -> UniswapV3SubgraphClient:
    settings = get_settings()
    return UniswapV3SubgraphClient(
        UniswapV3SubgraphClientSettings(
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def get_graph_api_key() -> str:
    api_key = get_settings().graph_api_key.strip()
    if not api_key:
        raise HTTPException(status_code=500, detail="GRAPH_API_KEY is required.")
    return api_key


def get_return_tags_use_case() -> TagServicePort:
    return ReturnTagsUseCase(pool_page_port=_get_uniswap_v3_subgraph_client())
