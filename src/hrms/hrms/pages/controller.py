from __future__ import annotations

from flask import Flask, abort, jsonify, redirect, render_template, send_from_directory, url_for

from ..common.web import branch_container, current_user, page_login_required
from ..container import BranchContainers
from ..core.enums import Model

# Only the login page is a plain view; the rest need a session.
_PUBLIC_VIEWS = {"login.html"}


def register(app: Flask, containers: BranchContainers) -> None:
    @app.route("/ping", methods=["GET"], endpoint="ping")
    def ping():
        return jsonify({"message": "pong"})

    @app.route("/", methods=["GET"], endpoint="login_page")
    def login_page():
        if current_user():
            return redirect(url_for("index"))
        return render_template("login.html")

    @app.route("/views/<path:filename>", methods=["GET"], endpoint="views")
    def views(filename: str):
        if filename in _PUBLIC_VIEWS:
            return render_template(filename)
        if filename.endswith(".html"):
            abort(404)
        return send_from_directory(app.template_folder, filename)

    @app.route("/index", methods=["GET"], endpoint="index")
    @page_login_required
    def index():
        user = current_user()
        service = branch_container(containers).authority_service
        menu = [
            m.value
            for m in Model
            if service.permissions_for(user_type=user.user_type, model=m) is not None
        ]
        return render_template("index.html", current_user=user, menu=menu)

    @app.route("/authority_render/<model>", methods=["GET"], endpoint="authority_render")
    @page_login_required
    def authority_render(model: str):
        try:
            m = Model(model)
        except ValueError:
            abort(404)

        user = current_user()
        permissions = branch_container(containers).authority_service.permissions_for(
            user_type=user.user_type,
            model=m,
        )
        if permissions is None:
            return render_template("403.html", current_user=user), 403
        return render_template(f"{m.value}.html", current_user=user, permissions=permissions, model=m.value)
