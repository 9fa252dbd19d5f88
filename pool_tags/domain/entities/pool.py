from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    id: str
    name: str
    symbol: str

    @classmethod
    def from_subgraph(cls, row: dict) -> "Token":
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            symbol=str(row["symbol"]),
        )


@dataclass(frozen=True)
class Pool:
    id: str
    created_at_timestamp: int
    token0: Token
    token1: Token

    @classmethod
    def from_subgraph(cls, row: dict) -> "Pool":
        # createdAtTimestamp is a BigInt on the subgraph and arrives as a string
        return cls(
            id=str(row["id"]),
            created_at_timestamp=int(row["createdAtTimestamp"]),
            token0=Token.from_subgraph(row["token0"]),
            token1=Token.from_subgraph(row["token1"]),
        )
