from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BranchCompany:
    company_id: str
    name: str
    description: Optional[str] = None
