from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import UserType


@dataclass(frozen=True)
class Account:
    """Login record of a staff member (authority table)."""

    authority_id: str
    staff_id: str
    user_type: UserType
    password_hash: str


@dataclass(frozen=True)
class PasswordView:
    """What password queries expose: never the hash."""

    staff_id: str
    staff_name: Optional[str]
    user_type: UserType


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    staff_id: str
    staff_name: str
    user_type: UserType
    branch_id: str
    db_name: str
