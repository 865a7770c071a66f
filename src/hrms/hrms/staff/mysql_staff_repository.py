from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone, like
from .model import Staff, StaffView
from .repository import StaffRepository

_FIELDS = (
    "staff_id",
    "staff_name",
    "dep_id",
    "rank_id",
    "leader_staff_id",
    "phone",
    "birthday",
    "identity_num",
    "sex",
    "nation",
    "school",
    "major",
    "edu_level",
    "base_salary",
    "card_num",
    "email",
    "entry_date",
)

_VIEW_SQL = """
    SELECT {columns}, d.dep_name, r.rank_name
    FROM staff s
    LEFT JOIN department d ON d.dep_id = s.dep_id
    LEFT JOIN `rank` r ON r.rank_id = s.rank_id
""".format(columns=", ".join(f"s.{f}" for f in _FIELDS))


def _row_to_staff(r: dict) -> Staff:
    values = {f: r.get(f) for f in _FIELDS}
    values["base_salary"] = Decimal(r.get("base_salary") or 0)
    return Staff(**values)


def _row_to_view(r: dict) -> StaffView:
    return StaffView(staff=_row_to_staff(r), dep_name=r.get("dep_name"), rank_name=r.get("rank_name"))


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _page(self, where: str, params: tuple, page: PageRequest) -> Page[StaffView]:
        sql = f"{_VIEW_SQL} {where} ORDER BY s.staff_id"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql, params)
            cur.execute(sql + limit_sql, params + limit_params)
            return Page(items=[_row_to_view(r) for r in fetchall(cur)], total=total)

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {', '.join(_FIELDS)} FROM staff WHERE staff_id=%s", (staff_id,))
            r = fetchone(cur)
            return _row_to_staff(r) if r else None

    def get_view(self, staff_id: str) -> Optional[StaffView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_VIEW_SQL} WHERE s.staff_id=%s", (staff_id,))
            r = fetchone(cur)
            return _row_to_view(r) if r else None

    def list_views(self, page: PageRequest) -> Page[StaffView]:
        return self._page("", (), page)

    def search_by_name(self, name_part: str, page: PageRequest) -> Page[StaffView]:
        return self._page("WHERE s.staff_name LIKE %s", (like(name_part),), page)

    def list_by_department(self, dep_id: str, page: PageRequest) -> Page[StaffView]:
        return self._page("WHERE s.dep_id=%s", (dep_id,), page)

    def create(self, staff: Staff) -> None:
        placeholders = ",".join(["%s"] * len(_FIELDS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO staff({', '.join(_FIELDS)}) VALUES({placeholders})",
                tuple(getattr(staff, f) for f in _FIELDS),
            )

    def update(self, staff: Staff) -> bool:
        assignments = ", ".join(f"{f}=%s" for f in _FIELDS[1:])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE staff SET {assignments} WHERE staff_id=%s",
                tuple(getattr(staff, f) for f in _FIELDS[1:]) + (staff.staff_id,),
            )
            return cur.rowcount > 0

    def delete(self, staff_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff WHERE staff_id=%s", (staff_id,))
            return cur.rowcount > 0
