from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from werkzeug.security import check_password_hash

from src.hrms.hrms.accounts.service import PasswordService, initial_password
from src.hrms.hrms.core.enums import UserType
from src.hrms.hrms.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hrms.hrms.staff.service import StaffService

from tests.fakes import ADMIN_ID, NORMAL_ID, seeded_repositories


@pytest.fixture
def repos():
    return seeded_repositories()


@pytest.fixture
def svc(repos):
    return StaffService(repos.staff, repos.departments, repos.ranks, PasswordService(repos.accounts))


def _data(**overrides):
    data = {
        "staff_name": "Alice",
        "dep_id": "dep_hr",
        "rank_id": "rank_junior",
        "identity_num": "110101199003071234",
        "birthday": "1990-03-07",
        "base_salary": "8000",
    }
    data.update(overrides)
    return data


def test_create_staff_creates_normal_account(svc, repos):
    staff = svc.create(_data())

    assert len(staff.staff_id) == 10
    assert staff.birthday == date(1990, 3, 7)
    assert staff.base_salary == Decimal("8000.00")

    account = repos.accounts.get_by_staff_id(staff.staff_id)
    assert account.user_type == UserType.NORMAL
    assert check_password_hash(account.password_hash, "071234")


def test_initial_password_falls_back_to_staff_id():
    assert initial_password(staff_id="0000000042", identity_num=None) == "0000000042"
    assert initial_password(staff_id="0000000042", identity_num="123") == "0000000042"
    assert initial_password(staff_id="0000000042", identity_num="ab123456") == "123456"


@pytest.mark.parametrize(
    "overrides",
    [
        {"staff_name": ""},
        {"dep_id": "dep_missing"},
        {"rank_id": "rank_missing"},
        {"leader_staff_id": "9999999999"},
        {"birthday": "07/03/1990"},
        {"base_salary": "-1"},
    ],
)
def test_create_validates_input(svc, repos, overrides):
    before = len(repos.staff.rows)
    with pytest.raises(ValidationError):
        svc.create(_data(**overrides))
    assert len(repos.staff.rows) == before


def test_failed_account_creation_removes_staff(svc, repos):
    repos.accounts.fail_on_create = True
    before = set(repos.staff.rows)

    with pytest.raises(RuntimeError):
        svc.create(_data())

    assert set(repos.staff.rows) == before


def test_edit_and_delete(svc, repos):
    staff = svc.create(_data())

    edited = svc.edit(_data(staff_id=staff.staff_id, staff_name="Alice B", leader_staff_id=NORMAL_ID))
    assert edited.leader_staff_id == NORMAL_ID
    assert repos.staff.get_by_id(staff.staff_id).staff_name == "Alice B"

    with pytest.raises(ValidationError):
        svc.edit(_data(staff_id=staff.staff_id, leader_staff_id=staff.staff_id))
    with pytest.raises(NotFoundError):
        svc.edit(_data(staff_id="9999999999"))

    svc.delete(staff.staff_id)
    assert repos.staff.get_by_id(staff.staff_id) is None
    assert repos.accounts.get_by_staff_id(staff.staff_id) is None
    with pytest.raises(NotFoundError):
        svc.delete(staff.staff_id)


def test_super_admin_is_never_deleted(svc, repos):
    with pytest.raises(AuthorizationError):
        svc.delete(ADMIN_ID)

    assert repos.staff.get_by_id(ADMIN_ID) is not None
    assert repos.accounts.get_by_staff_id(ADMIN_ID) is not None

def test_queries(svc):
    svc.create(_data(staff_name="Alice Smith"))

    assert svc.query("all").total == 3
    assert svc.query(NORMAL_ID).items[0].dep_name == "HR"
    assert [v.staff.staff_name for v in svc.query_by_name("Smith").items] == ["Alice Smith"]
    assert svc.query_by_department("HR").total == 3
    assert svc.query_by_department("all").total == 3

    with pytest.raises(NotFoundError):
        svc.query("9999999999")
    with pytest.raises(NotFoundError):
        svc.query_by_department("Sales")
