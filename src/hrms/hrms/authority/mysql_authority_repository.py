from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Model, UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AuthorityDetail
from .repository import AuthorityDetailRepository

_COLUMNS = "id, user_type, model, name, authority_content"


def _row_to_detail(r: dict) -> AuthorityDetail:
    return AuthorityDetail(
        id=r["id"],
        user_type=UserType(r["user_type"]),
        model=Model(r["model"]),
        name=r.get("name"),
        authority_content=r.get("authority_content") or "",
    )


class MySQLAuthorityDetailRepository(AuthorityDetailRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, detail_id: str) -> Optional[AuthorityDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM authority_detail WHERE id=%s", (detail_id,))
            r = fetchone(cur)
            return _row_to_detail(r) if r else None

    def get_by_user_type_and_model(self, user_type: UserType, model: Model) -> Optional[AuthorityDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM authority_detail WHERE user_type=%s AND model=%s",
                (user_type.value, model.value),
            )
            r = fetchone(cur)
            return _row_to_detail(r) if r else None

    def list_by_user_type(self, user_type: UserType) -> Sequence[AuthorityDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM authority_detail WHERE user_type=%s ORDER BY model",
                (user_type.value,),
            )
            return [_row_to_detail(r) for r in fetchall(cur)]

    def create(self, detail: AuthorityDetail) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO authority_detail(id, user_type, model, name, authority_content)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (detail.id, detail.user_type.value, detail.model.value, detail.name, detail.authority_content),
            )

    def update(self, detail: AuthorityDetail) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE authority_detail
                SET user_type=%s, model=%s, name=%s, authority_content=%s
                WHERE id=%s
                """,
                (detail.user_type.value, detail.model.value, detail.name, detail.authority_content, detail.id),
            )
            return cur.rowcount > 0
