from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_optional_date, today
from ..common.ids import random_id
from ..common.pagination import Page, PageRequest
from ..common.validators import optional_str, require_non_empty
from ..core.constants import ALL
from ..core.exceptions import NotFoundError
from .model import Notification
from .repository import NotificationRepository


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def _build(self, notice_id: str, data: Mapping[str, Any]) -> Notification:
        return Notification(
            notice_id=notice_id,
            notice_title=require_non_empty(data.get("notice_title"), "notice_title"),
            notice_content=optional_str(data.get("notice_content")),
            type=optional_str(data.get("type")),
            date=parse_optional_date(data.get("date"), "date") or today(),
        )

    def create(self, data: Mapping[str, Any]) -> Notification:
        notification = self._build(random_id("notice"), data)
        self._notifications.create(notification)
        return notification

    def edit(self, data: Mapping[str, Any]) -> Notification:
        notice_id = require_non_empty(data.get("notice_id"), "notice_id")
        if not self._notifications.get_by_id(notice_id):
            raise NotFoundError(f"Notification {notice_id!r} not found")

        notification = self._build(notice_id, data)
        self._notifications.update(notification)
        return notification

    def delete(self, notice_id: str) -> None:
        if not self._notifications.delete(notice_id):
            raise NotFoundError(f"Notification {notice_id!r} not found")

    def query_by_title(self, notice_title: str, page: Optional[PageRequest] = None) -> Page[Notification]:
        """'all' lists everything, anything else is a substring match on the title."""
        title = require_non_empty(notice_title, "notice_title")
        return self._notifications.search_by_title(None if title == ALL else title, page or PageRequest())
