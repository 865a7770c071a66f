from __future__ import annotations

import pytest

from config import DBSettings, LogSettings, ServerSettings, Settings
from src.hrms.hrms.companies.model import BranchCompany
from src.hrms.hrms.main import create_app

from tests.fakes import ADMIN_ID, ADMIN_PASSWORD, NORMAL_ID, NORMAL_PASSWORD, fake_branches

COMPANIES = (
    BranchCompany(company_id="C001", name="Head office"),
    BranchCompany(company_id="C002", name="North branch"),
    BranchCompany(company_id="C003", name="Not deployed"),
)


@pytest.fixture
def settings():
    return Settings(
        env="test",
        server=ServerSettings(port=8890, secret_key="test-secret"),
        db=DBSettings(db_name="hrms_C001,hrms_C002"),
        log=LogSettings(level="WARNING"),
    )


@pytest.fixture
def branches():
    return fake_branches("hrms_C001", "hrms_C002", companies=COMPANIES)


@pytest.fixture
def app(settings, branches):
    app = create_app(settings, branches)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, staff_id, password, branch_id="C001"):
    resp = client.post(
        "/account/login",
        json={"branch_id": branch_id, "staff_id": staff_id, "password": password},
    )
    assert resp.status_code == 200, resp.get_json()
    return resp


@pytest.fixture
def admin_client(client):
    _login(client, ADMIN_ID, ADMIN_PASSWORD)
    return client


@pytest.fixture
def normal_client(client):
    _login(client, NORMAL_ID, NORMAL_PASSWORD)
    return client
