"""Dump every branch database with `mysqldump` into backups/."""

from __future__ import annotations

import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.hrms.hrms.database.registry import branch_db_configs


def main() -> None:
    settings = load_settings()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    for target in branch_db_configs(settings.db):
        out_file = out_dir / f"{target.database}_{ts}.sql"
        cmd = [
            "mysqldump",
            f"-h{target.host}",
            f"-P{target.port}",
            f"-u{target.user}",
            f"-p{target.password}",
            target.database,
        ]
        try:
            with out_file.open("wb") as f:
                subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
        except FileNotFoundError:
            raise SystemExit("`mysqldump` not found. Install the MySQL client tools first.")
        print(f"OK: backup created: {out_file}")


if __name__ == "__main__":
    main()
