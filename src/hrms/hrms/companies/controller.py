from __future__ import annotations

from flask import Flask

from ..common.web import ok
from ..container import BranchContainers
from .service import BranchCompanyService


def register(app: Flask, containers: BranchContainers) -> None:
    # The company list lives in the default database; it is read before login.
    service = BranchCompanyService(
        containers.default.repos.companies,
        is_registered=containers.is_branch_registered,
    )

    @app.route("/company/query", methods=["GET"], endpoint="company_query")
    def company_query():
        companies = service.list_available()
        return ok(companies, total=len(companies))
