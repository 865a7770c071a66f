from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Notification


class NotificationRepository(Protocol):
    def get_by_id(self, notice_id: str) -> Optional[Notification]:
        raise NotImplementedError

    def search_by_title(self, title_part: Optional[str], page: PageRequest) -> Page[Notification]:
        """Newest first; None lists every notification."""

        raise NotImplementedError

    def create(self, notification: Notification) -> None:
        raise NotImplementedError

    def update(self, notification: Notification) -> bool:
        raise NotImplementedError

    def delete(self, notice_id: str) -> bool:
        raise NotImplementedError
