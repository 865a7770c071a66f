from __future__ import annotations

import time
from functools import wraps
from typing import TYPE_CHECKING, Any, Optional

from flask import current_app, g, jsonify, redirect, request, session, url_for

from ..accounts.model import SessionUser
from ..core.enums import Action, Model, UserType
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .log import get_logger
from .pagination import Page, PageRequest
from .serialization import to_json

if TYPE_CHECKING:
    from ..container import BranchContainers, Container

request_logger = get_logger("hrms.request")


def ok(data: Any = None, *, total: Optional[int] = None, status: int = 200):
    body: dict[str, Any] = {"success": True, "data": to_json(data)}
    if total is not None:
        body["total"] = total
    return jsonify(body), status


def ok_page(page: Page):
    return ok(page.items, total=page.total)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        # Forms still work for the plain HTML pages.
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def page_request() -> PageRequest:
    return PageRequest.from_args(request.args)


def store_session_user(user: SessionUser) -> None:
    session.clear()
    session["staff_id"] = user.staff_id
    session["staff_name"] = user.staff_name
    session["user_type"] = user.user_type.value
    session["branch_id"] = user.branch_id
    session["db_name"] = user.db_name


def current_user() -> Optional[SessionUser]:
    if "staff_id" not in session:
        return None
    try:
        return SessionUser(
            staff_id=session["staff_id"],
            staff_name=session.get("staff_name", ""),
            user_type=UserType(session["user_type"]),
            branch_id=session.get("branch_id", ""),
            db_name=session["db_name"],
        )
    except (KeyError, ValueError):
        # Session from an older layout; force a new login.
        session.clear()
        return None


def require_user() -> SessionUser:
    user = current_user()
    if not user:
        raise AuthenticationError("Please log in first")
    return user


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        require_user()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not require_user().user_type.is_admin:
            raise AuthorizationError("Administrator permission required")
        return view(*args, **kwargs)

    return wrapper


def permission_required(model: Model, action: Action):
    """Require the authority rule of the session user type to grant `action` on `model`."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = require_user()
            service = branch_container(current_app.config["HRMS_CONTAINERS"]).authority_service
            permissions = service.permissions_for(user_type=user.user_type, model=model)
            if not permissions or not permissions.get(action.value):
                raise AuthorizationError(f"No {action.value} permission on {model.value}")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def page_login_required(view):
    """HTML variant: redirect to the login page instead of a JSON 401."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_user():
            return redirect(url_for("login_page"))
        return view(*args, **kwargs)

    return wrapper


def branch_container(containers: "BranchContainers") -> "Container":
    """Container of the branch stored in the session, else the default one."""
    user = current_user()
    if user and user.db_name in containers.registry:
        return containers.get(user.db_name)
    return containers.default


def register_request_logging(app) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        latency_ms = round((time.perf_counter() - started) * 1000, 2) if started is not None else None
        request_logger.info(
            f"{request.method} {request.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
                "latency_ms": latency_ms,
                "db_name": session.get("db_name"),
            },
        )
        return response
