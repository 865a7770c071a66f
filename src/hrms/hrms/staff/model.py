from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.serialization import to_json


@dataclass(frozen=True)
class Staff:
    """Staff member of one branch company."""

    staff_id: str
    staff_name: str
    dep_id: str
    rank_id: str
    leader_staff_id: Optional[str] = None
    phone: Optional[str] = None
    birthday: Optional[date] = None
    identity_num: Optional[str] = None
    sex: Optional[str] = None
    nation: Optional[str] = None
    school: Optional[str] = None
    major: Optional[str] = None
    edu_level: Optional[str] = None
    base_salary: Decimal = Decimal("0.00")
    card_num: Optional[str] = None
    email: Optional[str] = None
    entry_date: Optional[date] = None


@dataclass(frozen=True)
class StaffView:
    """Staff row joined with department/rank names for listings."""

    staff: Staff
    dep_name: Optional[str]
    rank_name: Optional[str]

    def to_dict(self) -> dict:
        out = to_json(self.staff)
        out["dep_name"] = self.dep_name
        out["rank_name"] = self.rank_name
        return out
