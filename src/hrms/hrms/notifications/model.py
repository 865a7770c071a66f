from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Notification:
    notice_id: str
    notice_title: str
    date: date
    notice_content: Optional[str] = None
    type: Optional[str] = None
