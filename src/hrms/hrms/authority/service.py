from __future__ import annotations

from typing import Optional, Sequence

from ..accounts.model import SessionUser
from ..accounts.repository import AccountRepository
from ..common.ids import random_id
from ..common.log import get_logger
from ..common.validators import optional_str, require_non_empty
from ..core.enums import Model, UserType
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from .model import AuthorityDetail, format_actions, parse_actions
from .repository import AuthorityDetailRepository

logger = get_logger(__name__)


def parse_user_type(value: str) -> UserType:
    try:
        return UserType(require_non_empty(value, "user_type"))
    except ValueError:
        raise ValidationError(f"Unknown user_type {value!r}") from None


def parse_model(value: str) -> Model:
    try:
        return Model(require_non_empty(value, "model"))
    except ValueError:
        raise ValidationError(f"Unknown model {value!r}") from None


def _parse_content(value: Optional[str]) -> str:
    try:
        return format_actions(parse_actions(value or ""))
    except ValueError as e:
        raise ValidationError(f"Invalid authority_content: {e}") from None


class AuthorityService:
    """Use case: permission rules per user type, and promoting/demoting accounts."""

    def __init__(self, details: AuthorityDetailRepository, accounts: AccountRepository):
        self._details = details
        self._accounts = accounts

    def create(self, *, user_type: str, model: str, authority_content: str, name: Optional[str] = None) -> AuthorityDetail:
        ut = parse_user_type(user_type)
        m = parse_model(model)
        if self._details.get_by_user_type_and_model(ut, m):
            raise ConflictError(f"Authority for {ut.value}/{m.value} already exists")

        detail = AuthorityDetail(
            id=random_id("ad"),
            user_type=ut,
            model=m,
            name=optional_str(name),
            authority_content=_parse_content(authority_content),
        )
        self._details.create(detail)
        return detail

    def edit(
        self,
        *,
        detail_id: str,
        authority_content: Optional[str] = None,
        user_type: Optional[str] = None,
        model: Optional[str] = None,
        name: Optional[str] = None,
    ) -> AuthorityDetail:
        detail_id = require_non_empty(detail_id, "id")
        existing = self._details.get_by_id(detail_id)
        if not existing:
            raise NotFoundError(f"Authority detail {detail_id!r} not found")

        ut = parse_user_type(user_type) if user_type else existing.user_type
        m = parse_model(model) if model else existing.model
        clash = self._details.get_by_user_type_and_model(ut, m)
        if clash and clash.id != detail_id:
            raise ConflictError(f"Authority for {ut.value}/{m.value} already exists")

        detail = AuthorityDetail(
            id=detail_id,
            user_type=ut,
            model=m,
            name=optional_str(name) if name is not None else existing.name,
            authority_content=(
                _parse_content(authority_content) if authority_content is not None else existing.authority_content
            ),
        )
        self._details.update(detail)
        return detail

    def list_by_user_type(self, user_type: str) -> Sequence[AuthorityDetail]:
        return self._details.list_by_user_type(parse_user_type(user_type))

    def get_by_user_type_and_model(self, *, user_type: str, model: str) -> AuthorityDetail:
        ut = parse_user_type(user_type)
        m = parse_model(model)
        detail = self._details.get_by_user_type_and_model(ut, m)
        if not detail:
            raise NotFoundError(f"No authority for {ut.value}/{m.value}")
        return detail

    def permissions_for(self, *, user_type: UserType, model: Model) -> Optional[dict[str, bool]]:
        """Action flags for page rendering; None when the user type has no rule."""
        detail = self._details.get_by_user_type_and_model(user_type, model)
        return detail.permissions() if detail else None

    def set_admin(self, *, current: SessionUser, staff_id: str) -> None:
        self._set_user_type(current=current, staff_id=staff_id, user_type=UserType.ADMIN)

    def set_normal(self, *, current: SessionUser, staff_id: str) -> None:
        self._set_user_type(current=current, staff_id=staff_id, user_type=UserType.NORMAL)

    def _set_user_type(self, *, current: SessionUser, staff_id: str, user_type: UserType) -> None:
        if not current.user_type.is_admin:
            raise AuthorizationError("Only administrators can change account types")

        account = self._accounts.get_by_staff_id(staff_id)
        if not account:
            raise NotFoundError(f"Account for staff {staff_id!r} not found")
        if account.user_type == UserType.SUPER_ADMIN:
            raise AuthorizationError("The super administrator account cannot be changed")

        self._accounts.update_user_type(staff_id, user_type)
        logger.info(
            "account type changed",
            extra={"staff_id": staff_id, "user_type": user_type.value, "by": current.staff_id},
        )
