from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/depart/create", methods=["POST"], endpoint="depart_create")
    @permission_required(Model.DEPARTMENT, Action.CREATE)
    def depart_create():
        data = json_body()
        department = branch_container(containers).department_service.create(
            dep_name=data.get("dep_name"),
            dep_describe=data.get("dep_describe"),
        )
        return ok(department, status=201)

    @app.route("/depart/del/<dep_id>", methods=["DELETE"], endpoint="depart_delete")
    @permission_required(Model.DEPARTMENT, Action.DELETE)
    def depart_delete(dep_id: str):
        branch_container(containers).department_service.delete(dep_id)
        return ok()

    @app.route("/depart/edit", methods=["POST"], endpoint="depart_edit")
    @permission_required(Model.DEPARTMENT, Action.EDIT)
    def depart_edit():
        data = json_body()
        department = branch_container(containers).department_service.edit(
            dep_id=data.get("dep_id"),
            dep_name=data.get("dep_name"),
            dep_describe=data.get("dep_describe"),
        )
        return ok(department)

    @app.route("/depart/query/<dep_id>", methods=["GET"], endpoint="depart_query")
    @permission_required(Model.DEPARTMENT, Action.QUERY)
    def depart_query(dep_id: str):
        return ok_page(branch_container(containers).department_service.query(dep_id, page_request()))
