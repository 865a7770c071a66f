"""Load database/seed.sql into every branch database and set the admin password."""

from __future__ import annotations

import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.hrms.hrms.database.bootstrap import ADMIN_DEFAULT_PASSWORD, ADMIN_STAFF_ID, apply_seed_sql, ensure_admin_account
from src.hrms.hrms.database.registry import branch_db_configs


def main() -> None:
    settings = load_settings()
    seed_path = REPO_ROOT / "database" / "seed.sql"
    admin_password = os.getenv("HRMS_ADMIN_PASSWORD") or ADMIN_DEFAULT_PASSWORD

    for target in branch_db_configs(settings.db):
        apply_seed_sql(target, seed_path=seed_path)
        ensure_admin_account(target, password=admin_password)
        print(f"OK: seeded {target.describe()} (admin staff id {ADMIN_STAFF_ID})")


if __name__ == "__main__":
    main()
