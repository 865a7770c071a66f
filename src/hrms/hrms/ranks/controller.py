from __future__ import annotations

from flask import Flask

from ..common.web import branch_container, json_body, ok, ok_page, page_request, permission_required
from ..container import BranchContainers
from ..core.enums import Action, Model


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/rank/create", methods=["POST"], endpoint="rank_create")
    @permission_required(Model.RANK, Action.CREATE)
    def rank_create():
        data = json_body()
        rank = branch_container(containers).rank_service.create(rank_name=data.get("rank_name"))
        return ok(rank, status=201)

    @app.route("/rank/del/<rank_id>", methods=["DELETE"], endpoint="rank_delete")
    @permission_required(Model.RANK, Action.DELETE)
    def rank_delete(rank_id: str):
        branch_container(containers).rank_service.delete(rank_id)
        return ok()

    @app.route("/rank/edit", methods=["POST"], endpoint="rank_edit")
    @permission_required(Model.RANK, Action.EDIT)
    def rank_edit():
        data = json_body()
        rank = branch_container(containers).rank_service.edit(
            rank_id=data.get("rank_id"),
            rank_name=data.get("rank_name"),
        )
        return ok(rank)

    @app.route("/rank/query/<rank_id>", methods=["GET"], endpoint="rank_query")
    @permission_required(Model.RANK, Action.QUERY)
    def rank_query(rank_id: str):
        return ok_page(branch_container(containers).rank_service.query(rank_id, page_request()))
