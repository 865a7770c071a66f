from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Account type stored in the authority table."""

    SUPER_ADMIN = "supersys"
    ADMIN = "sys"
    NORMAL = "normal"

    @property
    def is_admin(self) -> bool:
        return self in (UserType.SUPER_ADMIN, UserType.ADMIN)


class Action(str, Enum):
    """Actions an authority rule can grant on a model."""

    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    QUERY = "query"


class Model(str, Enum):
    """Resource names used by authority rules and page templates."""

    DEPARTMENT = "department"
    RANK = "rank"
    STAFF = "staff"
    PASSWORD = "password"
    AUTHORITY = "authority"
    NOTIFICATION = "notification"
    COMPANY = "company"
    SALARY = "salary"
    SALARY_RECORD = "salary_record"
