from __future__ import annotations

import logging

from pool_tags.application.ports.pool_page_port import PoolPagePort
from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import TagFetchError, UnknownFetchError
from pool_tags.domain.services.pagination import iter_pool_pages
from pool_tags.domain.services.pool_tags import transform_pools_to_tags
from pool_tags.domain.services.subgraph_url import resolve_subgraph_url


logger = logging.getLogger(__name__)


class ReturnTagsUseCase:
    def __init__(self, *, pool_page_port: PoolPagePort):
        self._pool_page_port = pool_page_port

    def return_tags(self, *, chain_id: str, api_key: str) -> list[dict[str, str]]:
        url = resolve_subgraph_url(chain_id, api_key)

        all_tags: list[dict[str, str]] = []
        pages = 0
        for pools in iter_pool_pages(
            lambda last_timestamp: self._fetch_page(
                url=url,
                chain_id=chain_id,
                last_timestamp=last_timestamp,
            )
        ):
            pages += 1
            all_tags.extend(tag.to_record() for tag in transform_pools_to_tags(chain_id, pools))

        logger.info(
            "return_tags: tags_built chain_id=%s tags=%s pages=%s",
            chain_id,
            len(all_tags),
            pages,
        )
        return all_tags

    def _fetch_page(self, *, url: str, chain_id: str, last_timestamp: int) -> list[Pool]:
        try:
            return self._pool_page_port.fetch_pools_page(url=url, last_timestamp=last_timestamp)
        except Exception as exc:  # noqa: BLE001
            message = str(exc)
            logger.error(
                "return_tags: fetch_failed chain_id=%s last_timestamp=%s error=%r",
                chain_id,
                last_timestamp,
                exc,
            )
            if message:
                raise TagFetchError(f"Failed to fetch data: {message}") from exc
            raise UnknownFetchError("An unknown error occurred.") from exc
