from __future__ import annotations

from typing import Optional

from ..common.pagination import Page, PageRequest
from ..core.enums import UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone
from .model import Account, PasswordView
from .repository import AccountRepository

_VIEW_SQL = """
    SELECT a.staff_id, s.staff_name, a.user_type
    FROM authority a
    LEFT JOIN staff s ON s.staff_id = a.staff_id
"""


def _row_to_view(r: dict) -> PasswordView:
    return PasswordView(staff_id=r["staff_id"], staff_name=r.get("staff_name"), user_type=UserType(r["user_type"]))


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_staff_id(self, staff_id: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT authority_id, staff_id, user_type, password_hash
                FROM authority
                WHERE staff_id=%s
                """,
                (staff_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Account(
                authority_id=r["authority_id"],
                staff_id=r["staff_id"],
                user_type=UserType(r["user_type"]),
                password_hash=r["password_hash"],
            )

    def create(self, account: Account) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO authority(authority_id, staff_id, user_type, password_hash)
                VALUES(%s,%s,%s,%s)
                """,
                (account.authority_id, account.staff_id, account.user_type.value, account.password_hash),
            )

    def update_password(self, staff_id: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE authority SET password_hash=%s WHERE staff_id=%s", (password_hash, staff_id))
            return cur.rowcount > 0

    def update_user_type(self, staff_id: str, user_type: UserType) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE authority SET user_type=%s WHERE staff_id=%s", (user_type.value, staff_id))
            return cur.rowcount > 0

    def delete_by_staff_id(self, staff_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM authority WHERE staff_id=%s", (staff_id,))
            return cur.rowcount > 0

    def list_views(self, page: PageRequest) -> Page[PasswordView]:
        sql = f"{_VIEW_SQL} ORDER BY a.staff_id"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql)
            cur.execute(sql + limit_sql, limit_params)
            return Page(items=[_row_to_view(r) for r in fetchall(cur)], total=total)

    def get_view(self, staff_id: str) -> Optional[PasswordView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_VIEW_SQL} WHERE a.staff_id=%s", (staff_id,))
            r = fetchone(cur)
            return _row_to_view(r) if r else None
