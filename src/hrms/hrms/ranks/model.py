from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rank:
    rank_id: str
    rank_name: str
