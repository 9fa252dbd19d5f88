from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from pool_tags.domain.entities.pool import Pool


logger = logging.getLogger(__name__)


PAGE_SIZE = 1000


def is_last_page(rows: list[Pool], *, page_size: int = PAGE_SIZE) -> bool:
    return len(rows) < page_size


def next_cursor(rows: list[Pool]) -> int:
    """Cursor for the page after ``rows``.

    The next query asks for ``createdAtTimestamp_gt`` this value, so pools
    created at the same second as the last row that did not fit in this page
    are never returned. The page alone cannot show whether such pools exist.
    A warning is logged only when the last timestamp repeats inside the page,
    which makes a skip likely but is not the only way one happens.
    """
    boundary = rows[-1].created_at_timestamp
    tied = sum(1 for row in rows if row.created_at_timestamp == boundary)
    if tied > 1:
        logger.warning(
            "pagination: pagination_boundary_tie timestamp=%s rows_in_page=%s",
            boundary,
            tied,
        )
    return boundary


def iter_pool_pages(
    fetch_page: Callable[[int], list[Pool]],
    *,
    start_timestamp: int = 0,
) -> Iterator[list[Pool]]:
    last_timestamp = start_timestamp
    while True:
        rows = fetch_page(last_timestamp)
        yield rows
        if is_last_page(rows):
            return
        last_timestamp = next_cursor(rows)
