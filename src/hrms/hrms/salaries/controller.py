from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/salary/create", methods=["POST"], endpoint="salary_create")
    @permission_required(Model.SALARY, Action.CREATE)
    def salary_create():
        return ok(branch_container(containers).salary_service.create(json_body()), status=201)

    @app.route("/salary/delete/<salary_id>", methods=["DELETE"], endpoint="salary_delete")
    @permission_required(Model.SALARY, Action.DELETE)
    def salary_delete(salary_id: str):
        branch_container(containers).salary_service.delete(salary_id)
        return ok()

    @app.route("/salary/edit", methods=["POST"], endpoint="salary_edit")
    @permission_required(Model.SALARY, Action.EDIT)
    def salary_edit():
        return ok(branch_container(containers).salary_service.edit(json_body()))

    @app.route("/salary/query/<staff_id>", methods=["GET"], endpoint="salary_query")
    @permission_required(Model.SALARY, Action.QUERY)
    def salary_query(staff_id: str):
        return ok_page(branch_container(containers).salary_service.query_by_staff(staff_id, page_request()))
