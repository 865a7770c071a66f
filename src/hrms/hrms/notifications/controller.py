from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/notification/create", methods=["POST"], endpoint="notification_create")
    @permission_required(Model.NOTIFICATION, Action.CREATE)
    def notification_create():
        notification = branch_container(containers).notification_service.create(json_body())
        return ok(notification, status=201)

    @app.route("/notification/delete/<notice_id>", methods=["DELETE"], endpoint="notification_delete")
    @permission_required(Model.NOTIFICATION, Action.DELETE)
    def notification_delete(notice_id: str):
        branch_container(containers).notification_service.delete(notice_id)
        return ok()

    @app.route("/notification/edit", methods=["POST"], endpoint="notification_edit")
    @permission_required(Model.NOTIFICATION, Action.EDIT)
    def notification_edit():
        return ok(branch_container(containers).notification_service.edit(json_body()))

    @app.route("/notification/query/<notice_title>", methods=["GET"], endpoint="notification_query")
    @permission_required(Model.NOTIFICATION, Action.QUERY)
    def notification_query(notice_title: str):
        page = branch_container(containers).notification_service.query_by_title(notice_title, page_request())
        return ok_page(page)
