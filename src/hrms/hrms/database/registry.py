from __future__ import annotations

from typing import Callable, Iterator, Optional

from config import DBSettings

from ..common.log import get_logger
from ..core.exceptions import NotFoundError
from .connection import DatabaseConnection, DBConfig

logger = get_logger(__name__)

ConnectionFactory = Callable[[DBConfig], DatabaseConnection]


def branch_db_configs(settings: DBSettings) -> list[DBConfig]:
    return [
        DBConfig(
            host=settings.host,
            port=int(settings.port),
            user=settings.user,
            password=settings.password,
            database=db_name,
        )
        for db_name in settings.db_names
    ]


class DatabaseRegistry:
    """Branch database name -> connection, built once at startup.

    The first registered database is the default one; it holds the branch
    company list and serves requests made before login.
    """

    def __init__(self, *, name_prefix: str = "hrms_"):
        self._connections: dict[str, DatabaseConnection] = {}
        self._name_prefix = name_prefix

    @classmethod
    def from_settings(
        cls,
        settings: DBSettings,
        *,
        connection_factory: Optional[ConnectionFactory] = None,
    ) -> "DatabaseRegistry":
        factory = connection_factory or (lambda cfg: DatabaseConnection(cfg, pool_size=settings.pool_size))
        registry = cls(name_prefix=settings.name_prefix)
        for config in branch_db_configs(settings):
            registry.register(config.database, factory(config))
        return registry

    def register(self, name: str, connection: DatabaseConnection) -> None:
        self._connections[name] = connection
        logger.info(f"branch database {name} registered", extra={"db_name": name})

    @property
    def names(self) -> list[str]:
        return list(self._connections)

    @property
    def default_name(self) -> str:
        if not self._connections:
            raise NotFoundError("No branch database registered")
        return next(iter(self._connections))

    @property
    def default(self) -> DatabaseConnection:
        return self._connections[self.default_name]

    def get(self, name: str) -> DatabaseConnection:
        try:
            return self._connections[name]
        except KeyError:
            raise NotFoundError(f"Branch database {name!r} is not registered") from None

    def resolve_branch(self, branch_id: str) -> str:
        """Map a branch company id (e.g. C001) to its database name."""

        branch_id = (branch_id or "").strip()
        prefixed = f"{self._name_prefix}{branch_id}"
        if branch_id and prefixed in self._connections:
            return prefixed
        if branch_id in self._connections:
            return branch_id
        raise NotFoundError(f"Branch company {branch_id!r} not found")

    def __contains__(self, name: object) -> bool:
        return name in self._connections

    def __iter__(self) -> Iterator[str]:
        return iter(self._connections)

    def __len__(self) -> int:
        return len(self._connections)
