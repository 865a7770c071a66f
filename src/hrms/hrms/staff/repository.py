from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Staff, StaffView


class StaffRepository(Protocol):
    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        raise NotImplementedError

    def get_view(self, staff_id: str) -> Optional[StaffView]:
        raise NotImplementedError

    def list_views(self, page: PageRequest) -> Page[StaffView]:
        raise NotImplementedError

    def search_by_name(self, name_part: str, page: PageRequest) -> Page[StaffView]:
        """Substring match on staff_name."""

        raise NotImplementedError

    def list_by_department(self, dep_id: str, page: PageRequest) -> Page[StaffView]:
        raise NotImplementedError

    def create(self, staff: Staff) -> None:
        raise NotImplementedError

    def update(self, staff: Staff) -> bool:
        raise NotImplementedError

    def delete(self, staff_id: str) -> bool:
        raise NotImplementedError
