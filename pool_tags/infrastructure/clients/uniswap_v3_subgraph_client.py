from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import (
    SubgraphGraphQLError,
    SubgraphHttpError,
    SubgraphNoDataError,
)
from pool_tags.domain.services.pagination import iter_pool_pages


logger = logging.getLogger(__name__)


GET_POOLS_QUERY = """
query GetPools($lastTimestamp: Int) {
  pools(
    first: 1000,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $lastTimestamp }
  ) {
    id
    createdAtTimestamp
    token0 {
      id
      name
      symbol
    }
    token1 {
      id
      name
      symbol
    }
  }
}
"""


@dataclass(frozen=True)
class UniswapV3SubgraphClientSettings:
    timeout_seconds: float


class UniswapV3SubgraphClient:
    def __init__(
        self,
        settings: UniswapV3SubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def fetch_pools_page(self, *, url: str, last_timestamp: int) -> list[Pool]:
        payload = self._post_graphql(
            url=url,
            query=GET_POOLS_QUERY,
            variables={"lastTimestamp": int(last_timestamp)},
        )
        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if rows is None:
            raise SubgraphNoDataError("No data returned from GraphQL query.")

        pools = [Pool.from_subgraph(row) for row in rows]
        logger.info(
            "uniswap_v3_subgraph_client: fetched_pools_page fetched=%s last_timestamp=%s",
            len(pools),
            last_timestamp,
        )
        return pools

    def fetch_all_pools(self, *, url: str, start_timestamp: int = 0) -> list[Pool]:
        """Walk every page of pools created after ``start_timestamp``.

        Entry point for callers that want the raw pools instead of tags; it
        pages exactly like ``ReturnTagsUseCase`` through ``iter_pool_pages``.
        """
        result: list[Pool] = []
        pages = 0
        for rows in iter_pool_pages(
            lambda last_timestamp: self.fetch_pools_page(url=url, last_timestamp=last_timestamp),
            start_timestamp=start_timestamp,
        ):
            pages += 1
            result.extend(rows)

        logger.info(
            "uniswap_v3_subgraph_client: fetched_all_pools fetched=%s pages=%s start_timestamp=%s",
            len(result),
            pages,
            start_timestamp,
        )
        return result

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        with httpx.Client(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = client.post(
                url,
                json={"query": query, "variables": variables},
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
            if not response.is_success:
                raise SubgraphHttpError(response.status_code)
            payload = response.json()

        errors = payload.get("errors") or []
        if errors:
            messages = [str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors]
            for message in messages:
                logger.error("uniswap_v3_subgraph_client: graphql_error message=%s", message)
            raise SubgraphGraphQLError(messages)
        return payload

