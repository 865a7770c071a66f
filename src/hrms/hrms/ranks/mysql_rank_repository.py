from __future__ import annotations

from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone
from .model import Rank
from .repository import RankRepository


class MySQLRankRepository(RankRepository):
    # `rank` is a reserved word since MySQL 8, keep it quoted.

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, rank_id: str) -> Optional[Rank]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT rank_id, rank_name FROM `rank` WHERE rank_id=%s", (rank_id,))
            r = fetchone(cur)
            return Rank(rank_id=r["rank_id"], rank_name=r["rank_name"]) if r else None

    def get_by_name(self, rank_name: str) -> Optional[Rank]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT rank_id, rank_name FROM `rank` WHERE rank_name=%s", (rank_name,))
            r = fetchone(cur)
            return Rank(rank_id=r["rank_id"], rank_name=r["rank_name"]) if r else None

    def list_all(self, page: PageRequest) -> Page[Rank]:
        sql = "SELECT rank_id, rank_name FROM `rank` ORDER BY rank_name"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql)
            cur.execute(sql + limit_sql, limit_params)
            return Page(items=[Rank(rank_id=r["rank_id"], rank_name=r["rank_name"]) for r in fetchall(cur)], total=total)

    def create(self, rank: Rank) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO `rank`(rank_id, rank_name) VALUES(%s,%s)", (rank.rank_id, rank.rank_name))

    def update(self, rank: Rank) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE `rank` SET rank_name=%s WHERE rank_id=%s", (rank.rank_name, rank.rank_id))
            return cur.rowcount > 0

    def delete(self, rank_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM `rank` WHERE rank_id=%s", (rank_id,))
            return cur.rowcount > 0
