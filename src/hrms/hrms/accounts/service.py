from __future__ import annotations

from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.log import get_logger
from ..common.pagination import Page, PageRequest
from ..common.validators import optional_str, require_min_length, require_non_empty
from ..core.constants import ALL, INITIAL_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from ..core.enums import UserType
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from ..staff.repository import StaffRepository
from .model import Account, PasswordView, SessionUser
from .repository import AccountRepository

logger = get_logger(__name__)


def initial_password(*, staff_id: str, identity_num: Optional[str]) -> str:
    """Last characters of the identity number, or the staff id when there is none."""
    identity_num = (identity_num or "").strip()
    if len(identity_num) >= INITIAL_PASSWORD_LENGTH:
        return identity_num[-INITIAL_PASSWORD_LENGTH:]
    return staff_id


class AuthService:
    """Use case: authenticate a staff member against one branch database."""

    def __init__(self, accounts: AccountRepository, staff: StaffRepository):
        self._accounts = accounts
        self._staff = staff

    def authenticate(self, *, staff_id: Any, password: Any, branch_id: str, db_name: str) -> SessionUser:
        # JSON clients may send numeric ids and passwords.
        staff_id = optional_str(staff_id)
        password = "" if password is None else str(password)
        account = self._accounts.get_by_staff_id(staff_id) if staff_id else None
        if not account:
            raise AuthenticationError("Wrong staff id or password")

        try:
            ok = check_password_hash(account.password_hash, password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("login rejected", extra={"staff_id": staff_id, "db_name": db_name})
            raise AuthenticationError("Wrong staff id or password")

        staff = self._staff.get_by_id(staff_id)
        return SessionUser(
            staff_id=staff_id,
            staff_name=staff.staff_name if staff else staff_id,
            user_type=account.user_type,
            branch_id=branch_id,
            db_name=db_name,
        )


class PasswordService:
    """Use case: query and change login passwords."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def query(self, *, current: SessionUser, staff_id: str, page: Optional[PageRequest] = None) -> Page[PasswordView]:
        if staff_id == ALL:
            if not current.user_type.is_admin:
                raise AuthorizationError("Only administrators can list accounts")
            return self._accounts.list_views(page or PageRequest())

        self._require_self_or_admin(current, staff_id)
        view = self._accounts.get_view(staff_id)
        if not view:
            raise NotFoundError(f"Account for staff {staff_id!r} not found")
        return Page(items=[view], total=1)

    def edit(self, *, current: SessionUser, staff_id: Any, password: Any) -> None:
        staff_id = require_non_empty(staff_id, "staff_id")
        password = require_min_length(None if password is None else str(password), "password", MIN_PASSWORD_LENGTH)
        self._require_self_or_admin(current, staff_id)

        if not self._accounts.update_password(staff_id, generate_password_hash(password)):
            raise NotFoundError(f"Account for staff {staff_id!r} not found")
        logger.info("password changed", extra={"staff_id": staff_id, "by": current.staff_id})

    def create_account(self, *, staff_id: str, password: str, user_type: UserType = UserType.NORMAL) -> Account:
        account = Account(
            authority_id=f"auth_{staff_id}",
            staff_id=staff_id,
            user_type=user_type,
            password_hash=generate_password_hash(password),
        )
        self._accounts.create(account)
        return account

    def delete_account(self, *, staff_id: str) -> None:
        account = self._accounts.get_by_staff_id(staff_id)
        if account and account.user_type == UserType.SUPER_ADMIN:
            raise AuthorizationError("The super administrator account cannot be deleted")
        self._accounts.delete_by_staff_id(staff_id)

    @staticmethod
    def _require_self_or_admin(current: SessionUser, staff_id: str) -> None:
        if current.staff_id != staff_id and not current.user_type.is_admin:
            raise AuthorizationError("You can only manage your own password")
