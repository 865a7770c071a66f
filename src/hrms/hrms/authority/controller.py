from __future__ import annotations

from flask import Flask

from ..common.web import (
    admin_required,
    branch_container,
    json_body,
    login_required,
    ok,
    require_user,
)
from ..container import BranchContainers


def register(app: Flask, containers: BranchContainers) -> None:
    def service():
        return branch_container(containers).authority_service

    @app.route("/authority/create", methods=["POST"], endpoint="authority_create")
    @admin_required
    def authority_create():
        data = json_body()
        detail = service().create(
            user_type=data.get("user_type"),
            model=data.get("model"),
            authority_content=data.get("authority_content"),
            name=data.get("name"),
        )
        return ok(detail, status=201)

    @app.route("/authority/edit", methods=["POST"], endpoint="authority_edit")
    @admin_required
    def authority_edit():
        data = json_body()
        detail = service().edit(
            detail_id=data.get("id"),
            authority_content=data.get("authority_content"),
            user_type=data.get("user_type"),
            model=data.get("model"),
            name=data.get("name"),
        )
        return ok(detail)

    @app.route(
        "/authority/query_by_user_type/<user_type>",
        methods=["GET"],
        endpoint="authority_query_by_user_type",
    )
    @login_required
    def authority_query_by_user_type(user_type: str):
        details = service().list_by_user_type(user_type)
        return ok(details, total=len(details))

    @app.route(
        "/authority/query_by_user_type_and_model",
        methods=["POST"],
        endpoint="authority_query_by_user_type_and_model",
    )
    @login_required
    def authority_query_by_user_type_and_model():
        data = json_body()
        detail = service().get_by_user_type_and_model(user_type=data.get("user_type"), model=data.get("model"))
        return ok(detail)

    @app.route("/authority/set_admin/<staff_id>", methods=["POST"], endpoint="authority_set_admin")
    @admin_required
    def authority_set_admin(staff_id: str):
        service().set_admin(current=require_user(), staff_id=staff_id)
        return ok()

    @app.route("/authority/set_normal/<staff_id>", methods=["POST"], endpoint="authority_set_normal")
    @admin_required
    def authority_set_normal(staff_id: str):
        service().set_normal(current=require_user(), staff_id=staff_id)
        return ok()
