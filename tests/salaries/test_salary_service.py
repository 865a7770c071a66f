from __future__ import annotations

from decimal import Decimal

import pytest

from src.hrms.hrms.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hrms.hrms.salaries.service import SalaryService

from tests.fakes import NORMAL_ID, seeded_repositories


@pytest.fixture
def repos():
    return seeded_repositories()


@pytest.fixture
def svc(repos):
    return SalaryService(repos.salaries, repos.staff)


def test_create_salary(svc):
    salary = svc.create({"staff_id": NORMAL_ID, "base": "10000", "subsidy": 500.5, "fund": "true"})

    assert salary.staff_name == "Nora Normal"
    assert salary.base == Decimal("10000.00")
    assert salary.subsidy == Decimal("500.50")
    assert salary.bonus == Decimal("0.00")
    assert salary.fund is True


def test_one_salary_per_staff(svc):
    svc.create({"staff_id": NORMAL_ID, "base": "1"})
    with pytest.raises(ConflictError):
        svc.create({"staff_id": NORMAL_ID, "base": "2"})


@pytest.mark.parametrize(
    "data",
    [{"staff_id": "9999999999"}, {"staff_id": NORMAL_ID, "base": "-5"}, {"staff_id": NORMAL_ID, "bonus": "lots"}],
)
def test_create_validation(svc, data):
    with pytest.raises(ValidationError):
        svc.create(data)


def test_edit_keeps_unspecified_amounts(svc):
    salary = svc.create({"staff_id": NORMAL_ID, "base": "9000", "bonus": "100"})

    edited = svc.edit({"salary_id": salary.salary_id, "bonus": "300"})

    assert edited.base == Decimal("9000.00")
    assert edited.bonus == Decimal("300.00")
    assert svc.query_by_staff(NORMAL_ID).items == [edited]


def test_query_and_delete(svc):
    salary = svc.create({"staff_id": NORMAL_ID, "base": "9000"})
    assert svc.query_by_staff("all").total == 1

    svc.delete(salary.salary_id)
    with pytest.raises(NotFoundError):
        svc.query_by_staff(NORMAL_ID)
    with pytest.raises(NotFoundError):
        svc.delete(salary.salary_id)
