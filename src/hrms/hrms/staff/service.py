from __future__ import annotations

from typing import Any, Mapping, Optional

from ..accounts.service import PasswordService, initial_password
from ..common.datetime_utils import parse_optional_date
from ..common.ids import random_staff_id
from ..common.log import get_logger
from ..common.pagination import Page, PageRequest
from ..common.validators import optional_str, require_amount, require_non_empty
from ..core.constants import ALL
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from ..ranks.repository import RankRepository
from .model import Staff, StaffView
from .repository import StaffRepository

logger = get_logger(__name__)

_TEXT_FIELDS = (
    "phone",
    "identity_num",
    "sex",
    "nation",
    "school",
    "major",
    "edu_level",
    "card_num",
    "email",
)


class StaffService:
    """Use case: manage staff records of one branch."""

    def __init__(
        self,
        staff: StaffRepository,
        departments: DepartmentRepository,
        ranks: RankRepository,
        passwords: PasswordService,
    ):
        self._staff = staff
        self._departments = departments
        self._ranks = ranks
        self._passwords = passwords

    def _build(self, staff_id: str, data: Mapping[str, Any]) -> Staff:
        staff_name = require_non_empty(data.get("staff_name"), "staff_name")
        dep_id = require_non_empty(data.get("dep_id"), "dep_id")
        rank_id = require_non_empty(data.get("rank_id"), "rank_id")

        if not self._departments.get_by_id(dep_id):
            raise ValidationError(f"Department {dep_id!r} does not exist")
        if not self._ranks.get_by_id(rank_id):
            raise ValidationError(f"Rank {rank_id!r} does not exist")

        leader_staff_id = optional_str(data.get("leader_staff_id"))
        if leader_staff_id:
            if leader_staff_id == staff_id:
                raise ValidationError("A staff member cannot lead themselves")
            if not self._staff.get_by_id(leader_staff_id):
                raise ValidationError(f"Leader {leader_staff_id!r} does not exist")

        return Staff(
            staff_id=staff_id,
            staff_name=staff_name,
            dep_id=dep_id,
            rank_id=rank_id,
            leader_staff_id=leader_staff_id,
            birthday=parse_optional_date(data.get("birthday"), "birthday"),
            entry_date=parse_optional_date(data.get("entry_date"), "entry_date"),
            base_salary=require_amount(data.get("base_salary"), "base_salary"),
            **{f: optional_str(data.get(f)) for f in _TEXT_FIELDS},
        )

    def create(self, data: Mapping[str, Any]) -> Staff:
        staff = self._build(random_staff_id(), data)
        self._staff.create(staff)
        try:
            self._passwords.create_account(
                staff_id=staff.staff_id,
                password=initial_password(staff_id=staff.staff_id, identity_num=staff.identity_num),
            )
        except Exception:
            # A staff row without a login account is unusable.
            self._staff.delete(staff.staff_id)
            raise
        logger.info("staff created", extra={"staff_id": staff.staff_id, "dep_id": staff.dep_id})
        return staff

    def edit(self, data: Mapping[str, Any]) -> Staff:
        staff_id = require_non_empty(data.get("staff_id"), "staff_id")
        if not self._staff.get_by_id(staff_id):
            raise NotFoundError(f"Staff {staff_id!r} not found")

        staff = self._build(staff_id, data)
        self._staff.update(staff)
        return staff

    def delete(self, staff_id: str) -> None:
        if not self._staff.get_by_id(staff_id):
            raise NotFoundError(f"Staff {staff_id!r} not found")
        # Refuses the super administrator before anything is removed.
        self._passwords.delete_account(staff_id=staff_id)
        self._staff.delete(staff_id)
        logger.info("staff deleted", extra={"staff_id": staff_id})

    def query(self, staff_id: str, page: Optional[PageRequest] = None) -> Page[StaffView]:
        if staff_id == ALL:
            return self._staff.list_views(page or PageRequest())

        view = self._staff.get_view(staff_id)
        if not view:
            raise NotFoundError(f"Staff {staff_id!r} not found")
        return Page(items=[view], total=1)

    def query_by_name(self, staff_name: str, page: Optional[PageRequest] = None) -> Page[StaffView]:
        staff_name = require_non_empty(staff_name, "staff_name")
        return self._staff.search_by_name(staff_name, page or PageRequest())

    def query_by_department(self, dep_name: str, page: Optional[PageRequest] = None) -> Page[StaffView]:
        dep_name = require_non_empty(dep_name, "dep_name")
        if dep_name == ALL:
            return self._staff.list_views(page or PageRequest())

        department = self._departments.get_by_name(dep_name)
        if not department:
            raise NotFoundError(f"Department {dep_name!r} not found")
        return self._staff.list_by_department(department.dep_id, page or PageRequest())
