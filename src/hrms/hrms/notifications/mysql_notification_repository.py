from __future__ import annotations

from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone, like
from .model import Notification
from .repository import NotificationRepository

_COLUMNS = "notice_id, notice_title, notice_content, type, date"


def _row_to_notification(r: dict) -> Notification:
    return Notification(
        notice_id=r["notice_id"],
        notice_title=r["notice_title"],
        notice_content=r.get("notice_content"),
        type=r.get("type"),
        date=r["date"],
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, notice_id: str) -> Optional[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notification WHERE notice_id=%s", (notice_id,))
            r = fetchone(cur)
            return _row_to_notification(r) if r else None

    def search_by_title(self, title_part: Optional[str], page: PageRequest) -> Page[Notification]:
        where, params = ("", ()) if title_part is None else ("WHERE notice_title LIKE %s", (like(title_part),))
        sql = f"SELECT {_COLUMNS} FROM notification {where} ORDER BY date DESC, notice_id DESC"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql, params)
            cur.execute(sql + limit_sql, params + limit_params)
            return Page(items=[_row_to_notification(r) for r in fetchall(cur)], total=total)

    def create(self, notification: Notification) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO notification({_COLUMNS}) VALUES(%s,%s,%s,%s,%s)",
                (
                    notification.notice_id,
                    notification.notice_title,
                    notification.notice_content,
                    notification.type,
                    notification.date,
                ),
            )

    def update(self, notification: Notification) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE notification
                SET notice_title=%s, notice_content=%s, type=%s, date=%s
                WHERE notice_id=%s
                """,
                (
                    notification.notice_title,
                    notification.notice_content,
                    notification.type,
                    notification.date,
                    notification.notice_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, notice_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notification WHERE notice_id=%s", (notice_id,))
            return cur.rowcount > 0
