from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import BranchCompany
from .repository import BranchCompanyRepository


class MySQLBranchCompanyRepository(BranchCompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[BranchCompany]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT company_id, name, description FROM branch_company ORDER BY company_id")
            return [
                BranchCompany(company_id=r["company_id"], name=r["name"], description=r.get("description"))
                for r in fetchall(cur)
            ]
