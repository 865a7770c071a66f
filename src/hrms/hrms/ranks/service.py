from __future__ import annotations

from typing import Optional

from ..common.ids import random_id
from ..common.pagination import Page, PageRequest
from ..common.validators import require_non_empty
from ..core.constants import ALL
from ..core.exceptions import ConflictError, NotFoundError
from .model import Rank
from .repository import RankRepository


class RankService:
    def __init__(self, ranks: RankRepository):
        self._ranks = ranks

    def create(self, *, rank_name: str) -> Rank:
        rank_name = require_non_empty(rank_name, "rank_name")
        if self._ranks.get_by_name(rank_name):
            raise ConflictError(f"Rank {rank_name!r} already exists")

        rank = Rank(rank_id=random_id("rank"), rank_name=rank_name)
        self._ranks.create(rank)
        return rank

    def edit(self, *, rank_id: str, rank_name: str) -> Rank:
        rank_id = require_non_empty(rank_id, "rank_id")
        rank_name = require_non_empty(rank_name, "rank_name")

        if not self._ranks.get_by_id(rank_id):
            raise NotFoundError(f"Rank {rank_id!r} not found")
        same_name = self._ranks.get_by_name(rank_name)
        if same_name and same_name.rank_id != rank_id:
            raise ConflictError(f"Rank {rank_name!r} already exists")

        rank = Rank(rank_id=rank_id, rank_name=rank_name)
        self._ranks.update(rank)
        return rank

    def delete(self, rank_id: str) -> None:
        if not self._ranks.delete(rank_id):
            raise NotFoundError(f"Rank {rank_id!r} not found")

    def query(self, rank_id: str, page: Optional[PageRequest] = None) -> Page[Rank]:
        if rank_id == ALL:
            return self._ranks.list_all(page or PageRequest())

        rank = self._ranks.get_by_id(rank_id)
        if not rank:
            raise NotFoundError(f"Rank {rank_id!r} not found")
        return Page(items=[rank], total=1)
