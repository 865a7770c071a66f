from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from ..common.log import get_logger
from ..core.enums import UserType
from .connection import DBConfig

logger = get_logger(__name__)

ADMIN_STAFF_ID = "0000000001"
ADMIN_DEFAULT_PASSWORD = "admin123"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable for every branch database name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes, skips -- comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False
    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]

    for ch in "\n".join(lines):
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(target: DBConfig) -> None:
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(target: DBConfig, *, schema_path: str | Path) -> None:
    ensure_database_exists(target)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info(f"schema applied to {target.database}", extra={"db_name": target.database})


def apply_seed_sql(target: DBConfig, *, seed_path: str | Path) -> None:
    sql = _strip_create_db_and_use(Path(seed_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info(f"seed applied to {target.database}", extra={"db_name": target.database})


def ensure_admin_account(target: DBConfig, *, password: str = ADMIN_DEFAULT_PASSWORD) -> None:
    """Make sure the seeded administrator can log in.

    seed.sql creates the staff row; the password hash is produced here so the
    SQL file never carries one.
    """

    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT staff_id FROM staff WHERE staff_id=%s", (ADMIN_STAFF_ID,))
        if not cur.fetchone():
            raise RuntimeError(f"Missing seeded admin staff {ADMIN_STAFF_ID} in {target.database}")

        cur.execute("SELECT authority_id, password_hash FROM authority WHERE staff_id=%s", (ADMIN_STAFF_ID,))
        existing = cur.fetchone()
        if existing and existing["password_hash"]:
            return

        password_hash = generate_password_hash(password)
        if existing:
            cur.execute(
                "UPDATE authority SET password_hash=%s, user_type=%s WHERE staff_id=%s",
                (password_hash, UserType.SUPER_ADMIN.value, ADMIN_STAFF_ID),
            )
        else:
            cur.execute(
                """
                INSERT INTO authority (authority_id, staff_id, user_type, password_hash)
                VALUES (%s, %s, %s, %s)
                """,
                (f"auth_{ADMIN_STAFF_ID}", ADMIN_STAFF_ID, UserType.SUPER_ADMIN.value, password_hash),
            )
        conn.commit()
    finally:
        conn.close()


def list_tables(target: DBConfig) -> list[str]:
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
