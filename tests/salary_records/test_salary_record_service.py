from __future__ import annotations

from decimal import Decimal

import pytest

from src.hrms.hrms.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hrms.hrms.salaries.service import SalaryService
from src.hrms.hrms.salary_records.service import SalaryRecordService

from tests.fakes import ADMIN_ID, NORMAL_ID, seeded_repositories


@pytest.fixture
def repos():
    repos = seeded_repositories()
    SalaryService(repos.salaries, repos.staff).create({"staff_id": NORMAL_ID, "base": "10000", "fund": True})
    return repos


@pytest.fixture
def svc(repos):
    return SalaryRecordService(repos.salary_records, repos.salaries)


def test_create_derives_amounts_from_salary(svc):
    record = svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})

    assert record.staff_name == "Nora Normal"
    assert record.base == Decimal("10000.00")
    assert record.housing_fund == Decimal("1200.00")
    assert record.tax == Decimal("82.50")
    assert record.total == Decimal("7667.50")
    assert record.is_pay is False


def test_create_rules(svc):
    svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})

    with pytest.raises(ConflictError):
        svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})
    with pytest.raises(ValidationError):
        svc.create({"staff_id": ADMIN_ID, "salary_date": "2026-09"})
    with pytest.raises(ValidationError):
        svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-13"})


def test_edit_recomputes(svc):
    record = svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})

    edited = svc.edit({"salary_record_id": record.salary_record_id, "base": "20000", "fund": False})

    assert edited.housing_fund == Decimal("0.00")
    assert edited.tax == Decimal("1170.00")
    assert edited.total == Decimal("16730.00")


def test_pay_then_edit_is_rejected(svc):
    record = svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})
    assert svc.is_paid(record.salary_record_id) is False

    svc.pay(record.salary_record_id)

    assert svc.is_paid(record.salary_record_id) is True
    with pytest.raises(ConflictError):
        svc.pay(record.salary_record_id)
    with pytest.raises(ConflictError):
        svc.edit({"salary_record_id": record.salary_record_id, "bonus": "1"})


def test_query_and_delete(svc):
    record = svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-09"})
    svc.create({"staff_id": NORMAL_ID, "salary_date": "2026-10"})

    assert svc.query_by_staff(NORMAL_ID).total == 2
    assert svc.query_by_staff("all").total == 2
    assert svc.query_by_staff(ADMIN_ID).total == 0

    svc.delete(record.salary_record_id)
    with pytest.raises(NotFoundError):
        svc.delete(record.salary_record_id)
    with pytest.raises(NotFoundError):
        svc.is_paid(record.salary_record_id)


def test_fund_flag_survives_edits_with_zero_base(repos, svc):
    SalaryService(repos.salaries, repos.staff).create({"staff_id": ADMIN_ID, "base": "0", "fund": True})
    record = svc.create({"staff_id": ADMIN_ID, "salary_date": "2026-09"})
    assert record.fund is True

    edited = svc.edit({"salary_record_id": record.salary_record_id, "bonus": "500"})
    assert edited.fund is True
    assert repos.salary_records.get_by_id(record.salary_record_id).fund is True

    edited = svc.edit({"salary_record_id": record.salary_record_id, "base": "10000"})
    assert edited.housing_fund == Decimal("1200.00")
