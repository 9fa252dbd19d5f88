from __future__ import annotations

import json
import logging

import httpx
import pytest

from pool_tags.domain.exceptions import (
    SubgraphGraphQLError,
    SubgraphHttpError,
    SubgraphNoDataError,
)
from pool_tags.infrastructure.clients.uniswap_v3_subgraph_client import (
    GET_POOLS_QUERY,
    UniswapV3SubgraphClient,
    UniswapV3SubgraphClientSettings,
)


URL = "https://gateway.example.com/api/K1/subgraphs/id/deployment"


def _make_client(handler) -> UniswapV3SubgraphClient:
    return UniswapV3SubgraphClient(
        UniswapV3SubgraphClientSettings(timeout_seconds=5),
        transport=httpx.MockTransport(handler),
    )


def _pool_row(index: int, created_at: int) -> dict:
    return {
        "id": f"0xpool{index}",
        "createdAtTimestamp": str(created_at),
        "token0": {"id": "0xt0", "name": "USD Coin", "symbol": "USDC"},
        "token1": {"id": "0xt1", "name": "Wrapped Ether", "symbol": "WETH"},
    }


def _pools_payload(start: int, count: int) -> dict:
    return {"data": {"pools": [_pool_row(i, i) for i in range(start, start + count)]}}


def test_fetch_pools_page_posts_query_with_cursor_and_parses_pools():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=_pools_payload(101, 2))

    pools = _make_client(handler).fetch_pools_page(url=URL, last_timestamp=100)

    assert captured["method"] == "POST"
    assert captured["url"] == URL
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["headers"]["accept"] == "application/json"
    assert captured["body"] == {"query": GET_POOLS_QUERY, "variables": {"lastTimestamp": 100}}
    assert [pool.id for pool in pools] == ["0xpool101", "0xpool102"]
    assert pools[0].created_at_timestamp == 101
    assert pools[0].token0.symbol == "USDC"
    assert pools[1].token1.name == "Wrapped Ether"


def test_fetch_pools_page_raises_http_error_with_status():
    client = _make_client(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(SubgraphHttpError) as exc_info:
        client.fetch_pools_page(url=URL, last_timestamp=0)

    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "HTTP error! Status: 503"


def test_fetch_pools_page_logs_each_graphql_error(caplog: pytest.LogCaptureFixture):
    payload = {"errors": [{"message": "bad field"}, {"message": "indexer down"}], "data": None}
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SubgraphGraphQLError) as exc_info:
            client.fetch_pools_page(url=URL, last_timestamp=0)

    assert str(exc_info.value) == "GraphQL errors occurred: see logs for details."
    assert exc_info.value.messages == ["bad field", "indexer down"]
    logged = [record.getMessage() for record in caplog.records]
    assert any("bad field" in message for message in logged)
    assert any("indexer down" in message for message in logged)


@pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": {}}, {"data": {"pools": None}}])
def test_fetch_pools_page_raises_no_data(payload: dict):
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(SubgraphNoDataError, match="No data returned from GraphQL query."):
        client.fetch_pools_page(url=URL, last_timestamp=0)


def test_fetch_pools_page_accepts_empty_page():
    client = _make_client(lambda request: httpx.Response(200, json={"data": {"pools": []}}))

    assert client.fetch_pools_page(url=URL, last_timestamp=0) == []


def test_fetch_all_pools_advances_cursor_until_short_page():
    seen_cursors: list[int] = []
    pages = {
        0: _pools_payload(1, 1000),
        1000: _pools_payload(1001, 1000),
        2000: _pools_payload(2001, 400),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        cursor = json.loads(request.content)["variables"]["lastTimestamp"]
        seen_cursors.append(cursor)
        return httpx.Response(200, json=pages[cursor])

    pools = _make_client(handler).fetch_all_pools(url=URL)

    assert seen_cursors == [0, 1000, 2000]
    assert len(pools) == 2400
    timestamps = [pool.created_at_timestamp for pool in pools]
    assert timestamps == sorted(timestamps)
    assert len({pool.id for pool in pools}) == 2400


def test_fetch_all_pools_propagates_failure_without_partial_result(monkeypatch: pytest.MonkeyPatch):
    client = _make_client(lambda request: httpx.Response(200))
    calls = {"count": 0}

    def fake_post_graphql(*, url: str, query: str, variables: dict) -> dict:
        _ = (url, query)
        calls["count"] += 1
        if variables["lastTimestamp"] == 0:
            return _pools_payload(1, 1000)
        raise SubgraphHttpError(500)

    monkeypatch.setattr(client, "_post_graphql", fake_post_graphql)

    with pytest.raises(SubgraphHttpError):
        client.fetch_all_pools(url=URL)
    assert calls["count"] == 2


def test_fetch_all_pools_warns_on_boundary_timestamp_tie(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
):
    client = _make_client(lambda request: httpx.Response(200))
    first_page = {"data": {"pools": [_pool_row(i, min(i, 998)) for i in range(1, 1001)]}}
    scripted = [first_page, {"data": {"pools": []}}]

    def fake_post_graphql(*, url: str, query: str, variables: dict) -> dict:
        _ = (url, query, variables)
        return scripted.pop(0)

    monkeypatch.setattr(client, "_post_graphql", fake_post_graphql)

    with caplog.at_level(logging.WARNING):
        pools = client.fetch_all_pools(url=URL)

    assert len(pools) == 1000
    assert any("pagination_boundary_tie" in record.getMessage() for record in caplog.records)
