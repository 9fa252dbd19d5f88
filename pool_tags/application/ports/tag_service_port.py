from __future__ import annotations

from typing import Protocol


class TagServicePort(Protocol):
    def return_tags(self, *, chain_id: str, api_key: str) -> list[dict[str, str]]:
        ...
