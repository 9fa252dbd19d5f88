from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import Pool


class PoolPagePort(Protocol):
    def fetch_pools_page(self, *, url: str, last_timestamp: int) -> list[Pool]:
        ...
