from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    dep_id: str
    dep_name: str
    dep_describe: Optional[str] = None
