from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone
from .model import Salary
from .repository import SalaryRepository

_COLUMNS = "salary_id, staff_id, staff_name, base, subsidy, bonus, commission, other, fund"


def _row_to_salary(r: dict) -> Salary:
    return Salary(
        salary_id=r["salary_id"],
        staff_id=r["staff_id"],
        staff_name=r["staff_name"],
        base=Decimal(r["base"]),
        subsidy=Decimal(r["subsidy"]),
        bonus=Decimal(r["bonus"]),
        commission=Decimal(r["commission"]),
        other=Decimal(r["other"]),
        fund=bool(r["fund"]),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, salary_id: str) -> Optional[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary WHERE salary_id=%s", (salary_id,))
            r = fetchone(cur)
            return _row_to_salary(r) if r else None

    def get_by_staff_id(self, staff_id: str) -> Optional[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary WHERE staff_id=%s", (staff_id,))
            r = fetchone(cur)
            return _row_to_salary(r) if r else None

    def list_all(self, page: PageRequest) -> Page[Salary]:
        sql = f"SELECT {_COLUMNS} FROM salary ORDER BY staff_id"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql)
            cur.execute(sql + limit_sql, limit_params)
            return Page(items=[_row_to_salary(r) for r in fetchall(cur)], total=total)

    def create(self, salary: Salary) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO salary({_COLUMNS}) VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)",
                (
                    salary.salary_id,
                    salary.staff_id,
                    salary.staff_name,
                    salary.base,
                    salary.subsidy,
                    salary.bonus,
                    salary.commission,
                    salary.other,
                    int(salary.fund),
                ),
            )

    def update(self, salary: Salary) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary
                SET base=%s, subsidy=%s, bonus=%s, commission=%s, other=%s, fund=%s
                WHERE salary_id=%s
                """,
                (
                    salary.base,
                    salary.subsidy,
                    salary.bonus,
                    salary.commission,
                    salary.other,
                    int(salary.fund),
                    salary.salary_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, salary_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary WHERE salary_id=%s", (salary_id,))
            return cur.rowcount > 0
