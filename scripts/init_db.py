"""Create every configured branch database and apply database/schema.sql to it."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.hrms.hrms.database.bootstrap import apply_schema, list_tables
from src.hrms.hrms.database.registry import branch_db_configs


def main() -> None:
    settings = load_settings()
    schema_path = REPO_ROOT / "database" / "schema.sql"

    for target in branch_db_configs(settings.db):
        apply_schema(target, schema_path=schema_path)
        print(f"OK: schema.sql -> {target.describe()} (tables={len(list_tables(target))})")


if __name__ == "__main__":
    main()
