from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.hrms.hrms.accounts.model import SessionUser
from src.hrms.hrms.accounts.service import AuthService, PasswordService
from src.hrms.hrms.core.enums import UserType
from src.hrms.hrms.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

from tests.fakes import ADMIN_ID, ADMIN_PASSWORD, NORMAL_ID, NORMAL_PASSWORD, seeded_repositories


def _user(staff_id, user_type):
    return SessionUser(staff_id=staff_id, staff_name="x", user_type=user_type, branch_id="C001", db_name="hrms_C001")


ADMIN = _user(ADMIN_ID, UserType.SUPER_ADMIN)
NORMAL = _user(NORMAL_ID, UserType.NORMAL)


@pytest.fixture
def repos():
    return seeded_repositories()


def test_authenticate_success(repos):
    auth = AuthService(repos.accounts, repos.staff)

    user = auth.authenticate(staff_id=ADMIN_ID, password=ADMIN_PASSWORD, branch_id="C001", db_name="hrms_C001")

    assert user.staff_name == "Administrator"
    assert user.user_type == UserType.SUPER_ADMIN
    assert user.db_name == "hrms_C001"


@pytest.mark.parametrize(
    "staff_id, password",
    [(ADMIN_ID, "wrong"), ("9999999999", ADMIN_PASSWORD), ("", ""), (ADMIN_ID, None)],
)
def test_authenticate_failure(repos, staff_id, password):
    auth = AuthService(repos.accounts, repos.staff)
    with pytest.raises(AuthenticationError):
        auth.authenticate(staff_id=staff_id, password=password, branch_id="C001", db_name="hrms_C001")


def test_normal_user_changes_own_password(repos):
    svc = PasswordService(repos.accounts)

    svc.edit(current=NORMAL, staff_id=NORMAL_ID, password="brand-new")

    assert check_password_hash(repos.accounts.get_by_staff_id(NORMAL_ID).password_hash, "brand-new")


def test_password_rules(repos):
    svc = PasswordService(repos.accounts)

    with pytest.raises(ValidationError):
        svc.edit(current=NORMAL, staff_id=NORMAL_ID, password="12345")
    with pytest.raises(AuthorizationError):
        svc.edit(current=NORMAL, staff_id=ADMIN_ID, password="hijacked")
    with pytest.raises(NotFoundError):
        svc.edit(current=ADMIN, staff_id="9999999999", password="whatever")

    svc.edit(current=ADMIN, staff_id=NORMAL_ID, password="reset-by-admin")
    assert not check_password_hash(repos.accounts.get_by_staff_id(NORMAL_ID).password_hash, NORMAL_PASSWORD)


def test_password_query_scopes(repos):
    svc = PasswordService(repos.accounts)

    assert svc.query(current=ADMIN, staff_id="all").total == 2
    assert svc.query(current=NORMAL, staff_id=NORMAL_ID).items[0].user_type == UserType.NORMAL

    with pytest.raises(AuthorizationError):
        svc.query(current=NORMAL, staff_id="all")
    with pytest.raises(AuthorizationError):
        svc.query(current=NORMAL, staff_id=ADMIN_ID)


def test_authenticate_coerces_numeric_values(repos):
    auth = AuthService(repos.accounts, repos.staff)
    PasswordService(repos.accounts).edit(current=NORMAL, staff_id=NORMAL_ID, password=123456)

    user = auth.authenticate(staff_id=NORMAL_ID, password=123456, branch_id="C001", db_name="hrms_C001")
    assert user.staff_id == NORMAL_ID

    with pytest.raises(AuthenticationError):
        auth.authenticate(staff_id=2, password=NORMAL_PASSWORD, branch_id="C001", db_name="hrms_C001")
