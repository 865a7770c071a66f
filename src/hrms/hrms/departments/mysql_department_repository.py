from __future__ import annotations

from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository

_COLUMNS = "dep_id, dep_name, dep_describe"


def _row_to_department(r: dict) -> Department:
    return Department(dep_id=r["dep_id"], dep_name=r["dep_name"], dep_describe=r.get("dep_describe"))


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, dep_id: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM department WHERE dep_id=%s", (dep_id,))
            r = fetchone(cur)
            return _row_to_department(r) if r else None

    def get_by_name(self, dep_name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM department WHERE dep_name=%s", (dep_name,))
            r = fetchone(cur)
            return _row_to_department(r) if r else None

    def list_all(self, page: PageRequest) -> Page[Department]:
        sql = f"SELECT {_COLUMNS} FROM department ORDER BY dep_name"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql)
            cur.execute(sql + limit_sql, limit_params)
            return Page(items=[_row_to_department(r) for r in fetchall(cur)], total=total)

    def create(self, department: Department) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO department(dep_id, dep_name, dep_describe) VALUES(%s,%s,%s)",
                (department.dep_id, department.dep_name, department.dep_describe),
            )

    def update(self, department: Department) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE department SET dep_name=%s, dep_describe=%s WHERE dep_id=%s",
                (department.dep_name, department.dep_describe, department.dep_id),
            )
            return cur.rowcount > 0

    def delete(self, dep_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM department WHERE dep_id=%s", (dep_id,))
            return cur.rowcount > 0
