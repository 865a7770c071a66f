from __future__ import annotations

import re
from dataclasses import dataclass

from mysql.connector import pooling
from mysql.connector.constants import ClientFlag


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


def _pool_name(database: str) -> str:
    # Pool names only allow [a-zA-Z0-9._:-*$#], 64 chars max.
    return re.sub(r"[^a-zA-Z0-9.:\-*$#]", ".", f"hrms.{database}")[:64]


class DatabaseConnection:
    """Pooled connection factory for one branch database.

    Closing a connection obtained from connect() hands it back to the pool.
    Creating the pool opens a first connection, so an unreachable database
    fails here.
    """

    def __init__(self, config: DBConfig, *, pool_size: int = 5):
        self._config = config
        self._pool = pooling.MySQLConnectionPool(
            pool_name=_pool_name(config.database),
            pool_size=int(pool_size),
            pool_reset_session=True,
            host=config.host,
            port=int(config.port),
            user=config.user,
            password=config.password,
            database=config.database,
            charset="utf8mb4",
            # rowcount of UPDATE = matched rows, not changed rows
            client_flags=[ClientFlag.FOUND_ROWS],
        )

    @property
    def database(self) -> str:
        return self._config.database

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return self._pool.get_connection()
