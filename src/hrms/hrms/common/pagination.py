from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Mapping, Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: Optional[int] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * (self.limit or 0)

    def sql(self) -> tuple[str, tuple]:
        """LIMIT/OFFSET clause and params; empty when unpaginated."""
        if self.limit is None:
            return "", ()
        return " LIMIT %s OFFSET %s", (self.limit, self.offset)

    def apply(self, items: Sequence[T]) -> list[T]:
        if self.limit is None:
            return list(items)
        return list(items[self.offset : self.offset + self.limit])

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "PageRequest":
        page_s = args.get("page")
        limit_s = args.get("limit")
        if not page_s and not limit_s:
            return cls()
        try:
            page = int(page_s or 1)
            limit = int(limit_s or DEFAULT_PAGE_LIMIT)
        except ValueError:
            raise ValidationError("page and limit must be integers") from None
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive")
        return cls(page=page, limit=min(limit, MAX_PAGE_LIMIT))


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    total: int
