from __future__ import annotations

import pytest

from src.hrms.hrms.accounts.model import SessionUser
from src.hrms.hrms.authority.service import AuthorityService
from src.hrms.hrms.core.enums import Model, UserType
from src.hrms.hrms.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

from tests.fakes import ADMIN_ID, NORMAL_ID, seeded_repositories


def _user(staff_id, user_type):
    return SessionUser(staff_id=staff_id, staff_name="x", user_type=user_type, branch_id="C001", db_name="hrms_C001")


@pytest.fixture
def repos():
    return seeded_repositories()


@pytest.fixture
def svc(repos):
    return AuthorityService(repos.authority_details, repos.accounts)


def test_create_normalizes_content(svc):
    detail = svc.create(user_type="normal", model="staff", authority_content=" Query, create ,query")

    assert detail.authority_content == "create,query"
    assert detail.permissions() == {"create": True, "edit": False, "delete": False, "query": True}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"user_type": "root", "model": "staff", "authority_content": "query"},
        {"user_type": "normal", "model": "payroll", "authority_content": "query"},
        {"user_type": "normal", "model": "staff", "authority_content": "query,fly"},
    ],
)
def test_create_rejects_bad_values(svc, kwargs):
    with pytest.raises(ValidationError):
        svc.create(**kwargs)


def test_user_type_and_model_pair_is_unique(svc):
    with pytest.raises(ConflictError):
        svc.create(user_type="normal", model="notification", authority_content="query")

    detail = svc.create(user_type="normal", model="staff", authority_content="query")
    with pytest.raises(ConflictError):
        svc.edit(detail_id=detail.id, authority_content="query", model="notification")


def test_edit_and_lookup(svc):
    svc.edit(detail_id="ad_normal_notification", authority_content="query,edit")

    detail = svc.get_by_user_type_and_model(user_type="normal", model="notification")
    assert detail.authority_content == "edit,query"
    assert len(svc.list_by_user_type("supersys")) == len(Model)

    with pytest.raises(NotFoundError):
        svc.get_by_user_type_and_model(user_type="normal", model="salary")
    with pytest.raises(NotFoundError):
        svc.edit(detail_id="ad_missing", authority_content="query")


def test_edit_without_content_keeps_permissions(svc):
    detail = svc.edit(detail_id="ad_normal_notification", name="Notices")

    assert detail.name == "Notices"
    assert detail.authority_content == "query"
    assert svc.permissions_for(user_type=UserType.NORMAL, model=Model.NOTIFICATION)["query"] is True

def test_permissions_for_missing_rule_is_none(svc):
    assert svc.permissions_for(user_type=UserType.NORMAL, model=Model.SALARY) is None
    assert svc.permissions_for(user_type=UserType.NORMAL, model=Model.NOTIFICATION)["query"] is True


def test_set_admin_and_normal(svc, repos):
    admin = _user(ADMIN_ID, UserType.SUPER_ADMIN)

    svc.set_admin(current=admin, staff_id=NORMAL_ID)
    assert repos.accounts.get_by_staff_id(NORMAL_ID).user_type == UserType.ADMIN

    svc.set_normal(current=admin, staff_id=NORMAL_ID)
    assert repos.accounts.get_by_staff_id(NORMAL_ID).user_type == UserType.NORMAL


def test_super_admin_cannot_be_demoted(svc, repos):
    sys_admin = _user(NORMAL_ID, UserType.ADMIN)
    with pytest.raises(AuthorizationError):
        svc.set_normal(current=sys_admin, staff_id=ADMIN_ID)
    assert repos.accounts.get_by_staff_id(ADMIN_ID).user_type == UserType.SUPER_ADMIN


def test_normal_user_cannot_change_types(svc):
    with pytest.raises(AuthorizationError):
        svc.set_admin(current=_user(NORMAL_ID, UserType.NORMAL), staff_id=NORMAL_ID)
    with pytest.raises(NotFoundError):
        svc.set_admin(current=_user(ADMIN_ID, UserType.SUPER_ADMIN), staff_id="9999999999")
