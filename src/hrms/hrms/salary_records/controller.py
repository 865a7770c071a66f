from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    def service():
        return branch_container(containers).salary_record_service

    @app.route("/salary_record/create", methods=["POST"], endpoint="salary_record_create")
    @permission_required(Model.SALARY_RECORD, Action.CREATE)
    def salary_record_create():
        return ok(service().create(json_body()), status=201)

    @app.route(
        "/salary_record/delete/<salary_record_id>",
        methods=["DELETE"],
        endpoint="salary_record_delete",
    )
    @permission_required(Model.SALARY_RECORD, Action.DELETE)
    def salary_record_delete(salary_record_id: str):
        service().delete(salary_record_id)
        return ok()

    @app.route("/salary_record/edit", methods=["POST"], endpoint="salary_record_edit")
    @permission_required(Model.SALARY_RECORD, Action.EDIT)
    def salary_record_edit():
        return ok(service().edit(json_body()))

    @app.route("/salary_record/query/<staff_id>", methods=["GET"], endpoint="salary_record_query")
    @permission_required(Model.SALARY_RECORD, Action.QUERY)
    def salary_record_query(staff_id: str):
        return ok_page(service().query_by_staff(staff_id, page_request()))

    @app.route(
        "/salary_record/get_salary_record_is_pay_by_id/<salary_record_id>",
        methods=["GET"],
        endpoint="salary_record_is_pay",
    )
    @permission_required(Model.SALARY_RECORD, Action.QUERY)
    def salary_record_is_pay(salary_record_id: str):
        return ok({"is_pay": service().is_paid(salary_record_id)})

    @app.route(
        "/salary_record/pay_salary_record_by_id/<salary_record_id>",
        methods=["GET"],
        endpoint="salary_record_pay",
    )
    @permission_required(Model.SALARY_RECORD, Action.EDIT)
    def salary_record_pay(salary_record_id: str):
        service().pay(salary_record_id)
        return ok({"is_pay": True})
