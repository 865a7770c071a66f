from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    def service():
        return branch_container(containers).staff_service

    @app.route("/staff/create", methods=["POST"], endpoint="staff_create")
    @permission_required(Model.STAFF, Action.CREATE)
    def staff_create():
        return ok(service().create(json_body()), status=201)

    @app.route("/staff/del/<staff_id>", methods=["DELETE"], endpoint="staff_delete")
    @permission_required(Model.STAFF, Action.DELETE)
    def staff_delete(staff_id: str):
        service().delete(staff_id)
        return ok()

    @app.route("/staff/edit", methods=["POST"], endpoint="staff_edit")
    @permission_required(Model.STAFF, Action.EDIT)
    def staff_edit():
        return ok(service().edit(json_body()))

    @app.route("/staff/query/<staff_id>", methods=["GET"], endpoint="staff_query")
    @permission_required(Model.STAFF, Action.QUERY)
    def staff_query(staff_id: str):
        return ok_page(service().query(staff_id, page_request()))

    @app.route("/staff/query_by_name/<staff_name>", methods=["GET"], endpoint="staff_query_by_name")
    @permission_required(Model.STAFF, Action.QUERY)
    def staff_query_by_name(staff_name: str):
        return ok_page(service().query_by_name(staff_name, page_request()))

    @app.route("/staff/query_by_dep/<dep_name>", methods=["GET"], endpoint="staff_query_by_dep")
    @permission_required(Model.STAFF, Action.QUERY)
    def staff_query_by_dep(dep_name: str):
        return ok_page(service().query_by_department(dep_name, page_request()))
