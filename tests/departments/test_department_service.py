from __future__ import annotations

import pytest

from src.hrms.hrms.common.pagination import PageRequest
from src.hrms.hrms.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hrms.hrms.departments.model import Department
from src.hrms.hrms.departments.service import DepartmentService
from src.hrms.hrms.ranks.model import Rank
from src.hrms.hrms.ranks.service import RankService

from tests.fakes import FakeDepartmentRepo, FakeRankRepo


@pytest.fixture
def departments():
    return FakeDepartmentRepo(Department(dep_id="dep_hr", dep_name="HR"))


def test_create_department(departments):
    svc = DepartmentService(departments)

    dep = svc.create(dep_name="  Finance ", dep_describe="")

    assert dep.dep_name == "Finance"
    assert dep.dep_describe is None
    assert dep.dep_id.startswith("dep_")
    assert departments.get_by_id(dep.dep_id) == dep


def test_create_rejects_duplicate_and_blank_names(departments):
    svc = DepartmentService(departments)
    with pytest.raises(ConflictError):
        svc.create(dep_name="HR")
    with pytest.raises(ValidationError):
        svc.create(dep_name="   ")


def test_edit_department(departments):
    svc = DepartmentService(departments)
    other = svc.create(dep_name="IT")

    svc.edit(dep_id="dep_hr", dep_name="Human Resources", dep_describe="people")
    assert departments.get_by_id("dep_hr").dep_name == "Human Resources"

    with pytest.raises(ConflictError):
        svc.edit(dep_id=other.dep_id, dep_name="Human Resources")
    with pytest.raises(NotFoundError):
        svc.edit(dep_id="dep_missing", dep_name="X")


def test_delete_and_query(departments):
    svc = DepartmentService(departments)
    svc.create(dep_name="IT")

    assert svc.query("all").total == 2
    assert svc.query("dep_hr").items[0].dep_name == "HR"

    page = svc.query("all", PageRequest(page=2, limit=1))
    assert page.total == 2
    assert len(page.items) == 1

    svc.delete("dep_hr")
    with pytest.raises(NotFoundError):
        svc.query("dep_hr")
    with pytest.raises(NotFoundError):
        svc.delete("dep_hr")


def test_rank_rules():
    ranks = FakeRankRepo(Rank(rank_id="rank_junior", rank_name="Junior"))
    svc = RankService(ranks)

    senior = svc.create(rank_name="Senior")
    assert svc.query("all").total == 2

    with pytest.raises(ConflictError):
        svc.create(rank_name="Junior")
    with pytest.raises(ConflictError):
        svc.edit(rank_id=senior.rank_id, rank_name="Junior")

    svc.edit(rank_id=senior.rank_id, rank_name="Lead")
    assert ranks.get_by_id(senior.rank_id).rank_name == "Lead"

    svc.delete(senior.rank_id)
    with pytest.raises(NotFoundError):
        svc.query(senior.rank_id)
