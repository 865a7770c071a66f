from __future__ import annotations

from flask import Flask, session

from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..common.web import (
    branch_container,
    json_body,
    ok,
    ok_page,
    page_request,
    permission_required,
    require_user,
    store_session_user,
)
from ..container import BranchContainers
from ..core.enums import Action, Model

logger = get_logger(__name__)


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/account/login", methods=["POST"], endpoint="account_login")
    def account_login():
        data = json_body()
        branch_id = require_non_empty(data.get("branch_id"), "branch_id")
        db_name = containers.resolve_branch(branch_id)

        user = containers.get(db_name).auth_service.authenticate(
            staff_id=data.get("staff_id", ""),
            password=data.get("password", ""),
            branch_id=branch_id,
            db_name=db_name,
        )
        store_session_user(user)
        logger.info("login", extra={"staff_id": user.staff_id, "db_name": db_name})
        return ok(
            {
                "staff_id": user.staff_id,
                "staff_name": user.staff_name,
                "user_type": user.user_type,
                "branch_id": user.branch_id,
            }
        )

    @app.route("/account/quit", methods=["POST"], endpoint="account_quit")
    def account_quit():
        session.clear()
        return ok()

    @app.route("/password/query/<staff_id>", methods=["GET"], endpoint="password_query")
    @permission_required(Model.PASSWORD, Action.QUERY)
    def password_query(staff_id: str):
        page = branch_container(containers).password_service.query(
            current=require_user(),
            staff_id=staff_id,
            page=page_request(),
        )
        return ok_page(page)

    @app.route("/password/edit", methods=["POST"], endpoint="password_edit")
    @permission_required(Model.PASSWORD, Action.EDIT)
    def password_edit():
        data = json_body()
        branch_container(containers).password_service.edit(
            current=require_user(),
            staff_id=data.get("staff_id"),
            password=data.get("password", ""),
        )
        return ok()
