from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Rank


class RankRepository(Protocol):
    def get_by_id(self, rank_id: str) -> Optional[Rank]:
        raise NotImplementedError

    def get_by_name(self, rank_name: str) -> Optional[Rank]:
        raise NotImplementedError

    def list_all(self, page: PageRequest) -> Page[Rank]:
        raise NotImplementedError

    def create(self, rank: Rank) -> None:
        raise NotImplementedError

    def update(self, rank: Rank) -> bool:
        raise NotImplementedError

    def delete(self, rank_id: str) -> bool:
        raise NotImplementedError
