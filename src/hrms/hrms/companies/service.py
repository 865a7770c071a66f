from __future__ import annotations

from typing import Callable, Sequence

from .model import BranchCompany
from .repository import BranchCompanyRepository


class BranchCompanyService:
    """Lists branch companies for the login form.

    The list lives in the default database; only companies whose database is
    registered at startup are offered, since logging into the others would fail.
    """

    def __init__(self, companies: BranchCompanyRepository, *, is_registered: Callable[[str], bool]):
        self._companies = companies
        self._is_registered = is_registered

    def list_available(self) -> Sequence[BranchCompany]:
        return [c for c in self._companies.list_all() if self._is_registered(c.company_id)]
