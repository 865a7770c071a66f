from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AuthService, PasswordService
from .authority.mysql_authority_repository import MySQLAuthorityDetailRepository
from .authority.repository import AuthorityDetailRepository
from .authority.service import AuthorityService
from .companies.mysql_company_repository import MySQLBranchCompanyRepository
from .companies.repository import BranchCompanyRepository
from .core.exceptions import NotFoundError
from .database.connection import DatabaseConnection
from .database.registry import DatabaseRegistry
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .ranks.mysql_rank_repository import MySQLRankRepository
from .ranks.repository import RankRepository
from .ranks.service import RankService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService
from .salary_records.mysql_salary_record_repository import MySQLSalaryRecordRepository
from .salary_records.repository import SalaryRecordRepository
from .salary_records.service import SalaryRecordService
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService


@dataclass(frozen=True)
class Repositories:
    departments: DepartmentRepository
    ranks: RankRepository
    staff: StaffRepository
    accounts: AccountRepository
    authority_details: AuthorityDetailRepository
    notifications: NotificationRepository
    companies: BranchCompanyRepository
    salaries: SalaryRepository
    salary_records: SalaryRecordRepository


@dataclass(frozen=True)
class Container:
    """Services bound to one branch database."""

    db_name: str
    repos: Repositories

    auth_service: AuthService
    password_service: PasswordService
    department_service: DepartmentService
    rank_service: RankService
    staff_service: StaffService
    authority_service: AuthorityService
    notification_service: NotificationService
    salary_service: SalaryService
    salary_record_service: SalaryRecordService


def mysql_repositories(conn: DatabaseConnection) -> Repositories:
    return Repositories(
        departments=MySQLDepartmentRepository(conn),
        ranks=MySQLRankRepository(conn),
        staff=MySQLStaffRepository(conn),
        accounts=MySQLAccountRepository(conn),
        authority_details=MySQLAuthorityDetailRepository(conn),
        notifications=MySQLNotificationRepository(conn),
        companies=MySQLBranchCompanyRepository(conn),
        salaries=MySQLSalaryRepository(conn),
        salary_records=MySQLSalaryRecordRepository(conn),
    )


def build_container(db_name: str, repos: Repositories) -> Container:
    password_service = PasswordService(repos.accounts)
    return Container(
        db_name=db_name,
        repos=repos,
        auth_service=AuthService(repos.accounts, repos.staff),
        password_service=password_service,
        department_service=DepartmentService(repos.departments),
        rank_service=RankService(repos.ranks),
        staff_service=StaffService(repos.staff, repos.departments, repos.ranks, password_service),
        authority_service=AuthorityService(repos.authority_details, repos.accounts),
        notification_service=NotificationService(repos.notifications),
        salary_service=SalaryService(repos.salaries, repos.staff),
        salary_record_service=SalaryRecordService(repos.salary_records, repos.salaries),
    )


class BranchContainers:
    """One container per registered branch database."""

    def __init__(self, registry: DatabaseRegistry, containers: Mapping[str, Container]):
        self._registry = registry
        self._containers = dict(containers)

    @classmethod
    def from_registry(
        cls,
        registry: DatabaseRegistry,
        *,
        repositories: Callable[[DatabaseConnection], Repositories] = mysql_repositories,
    ) -> "BranchContainers":
        containers = {name: build_container(name, repositories(registry.get(name))) for name in registry.names}
        return cls(registry, containers)

    @property
    def registry(self) -> DatabaseRegistry:
        return self._registry

    @property
    def default(self) -> Container:
        return self._containers[self._registry.default_name]

    def get(self, db_name: str) -> Container:
        self._registry.get(db_name)
        return self._containers[db_name]

    def resolve_branch(self, branch_id: str) -> str:
        return self._registry.resolve_branch(branch_id)

    def is_branch_registered(self, branch_id: str) -> bool:
        try:
            self._registry.resolve_branch(branch_id)
        except NotFoundError:
            return False
        return True
