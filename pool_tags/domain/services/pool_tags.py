from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import Pool, Token


logger = logging.getLogger(__name__)


PROJECT_NAME = "Uniswap v3"
WEBSITE_LINK = "https://uniswap.org"
MAX_SYMBOLS_LENGTH = 45

_HTML_TAG_RE = re.compile(r"<[^>]*>")


def contains_html_or_markdown(text: str) -> bool:
    return _HTML_TAG_RE.search(text) is not None


def truncate_symbols(text: str, max_length: int = MAX_SYMBOLS_LENGTH) -> str:
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


def _is_flagged(token: Token) -> bool:
    return contains_html_or_markdown(token.name) or contains_html_or_markdown(token.symbol)


def build_contract_tag(chain_id: str, pool: Pool) -> ContractTag:
    token0, token1 = pool.token0, pool.token1
    symbols = truncate_symbols(f"{token0.symbol}/{token1.symbol}")
    return ContractTag(
        contract_address=f"eip155:{chain_id}:{pool.id}",
        public_name_tag=f"{symbols} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the "
            f"{token0.name} ({token0.symbol}) / {token1.name} ({token1.symbol}) pair."
        ),
    )


def transform_pools_to_tags(chain_id: str, pools: Iterable[Pool]) -> list[ContractTag]:
    """Map pools to contract tags, dropping any pool with a token carrying markup.

    Rejected tokens are collected as ``"<name>, Symbol: <symbol>"`` and logged
    once for the whole call.
    """
    rejected: list[str] = []
    tags: list[ContractTag] = []
    for pool in pools:
        flagged = [token for token in (pool.token0, pool.token1) if _is_flagged(token)]
        if flagged:
            rejected.extend(f"{token.name}, Symbol: {token.symbol}" for token in flagged)
            continue
        tags.append(build_contract_tag(chain_id, pool))

    if rejected:
        logger.warning(
            "pool_tags: rejected_pools chain_id=%s count=%s reason=html_or_markdown tokens=%s",
            chain_id,
            len(rejected),
            "; ".join(rejected),
        )
    return tags
