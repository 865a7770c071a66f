from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.mysql_base import count, db_cursor, fetchall, fetchone
from .model import SalaryRecord
from .repository import SalaryRecordRepository

_AMOUNTS = (
    "base",
    "subsidy",
    "bonus",
    "commission",
    "other",
    "pension_insurance",
    "medical_insurance",
    "unemployment_insurance",
    "housing_fund",
    "tax",
    "total",
)
_FLAGS = ("fund", "is_pay")
_FIELDS = ("salary_record_id", "staff_id", "staff_name", "salary_date") + _AMOUNTS + _FLAGS
_COLUMNS = ", ".join(_FIELDS)


def _row_to_record(r: dict) -> SalaryRecord:
    values = {f: r[f] for f in ("salary_record_id", "staff_id", "staff_name", "salary_date")}
    values.update({f: Decimal(r[f]) for f in _AMOUNTS})
    values.update({f: bool(r[f]) for f in _FLAGS})
    return SalaryRecord(**values)


def _params(record: SalaryRecord) -> tuple:
    return tuple(int(getattr(record, f)) if f in _FLAGS else getattr(record, f) for f in _FIELDS)


class MySQLSalaryRecordRepository(SalaryRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, salary_record_id: str) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_record WHERE salary_record_id=%s", (salary_record_id,))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def get_for_staff_and_month(self, staff_id: str, salary_date: str) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_record WHERE staff_id=%s AND salary_date=%s",
                (staff_id, salary_date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_staff(self, staff_id: Optional[str], page: PageRequest) -> Page[SalaryRecord]:
        where, params = ("", ()) if staff_id is None else ("WHERE staff_id=%s", (staff_id,))
        sql = f"SELECT {_COLUMNS} FROM salary_record {where} ORDER BY salary_date DESC, staff_id"
        limit_sql, limit_params = page.sql()
        with db_cursor(self._conn_factory) as (_, cur):
            total = count(cur, sql, params)
            cur.execute(sql + limit_sql, params + limit_params)
            return Page(items=[_row_to_record(r) for r in fetchall(cur)], total=total)

    def create(self, record: SalaryRecord) -> None:
        placeholders = ",".join(["%s"] * len(_FIELDS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO salary_record({_COLUMNS}) VALUES({placeholders})", _params(record))

    def update(self, record: SalaryRecord) -> bool:
        assignments = ", ".join(f"{f}=%s" for f in _AMOUNTS + ("fund",))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE salary_record SET {assignments} WHERE salary_record_id=%s AND is_pay=0",
                tuple(getattr(record, f) for f in _AMOUNTS) + (int(record.fund), record.salary_record_id),
            )
            return cur.rowcount > 0

    def mark_paid(self, salary_record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salary_record SET is_pay=1 WHERE salary_record_id=%s AND is_pay=0",
                (salary_record_id,),
            )
            return cur.rowcount > 0

    def delete(self, salary_record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_record WHERE salary_record_id=%s", (salary_record_id,))
            return cur.rowcount > 0
