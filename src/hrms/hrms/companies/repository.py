from __future__ import annotations

from typing import Protocol, Sequence

from .model import BranchCompany


class BranchCompanyRepository(Protocol):
    def list_all(self) -> Sequence[BranchCompany]:
        raise NotImplementedError
