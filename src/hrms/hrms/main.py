from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import Settings, load_settings

from .accounts.controller import register as register_accounts
from .authority.controller import register as register_authority
from .common.errors import register_error_handlers
from .common.log import get_logger, setup_logging
from .common.web import register_request_logging
from .companies.controller import register as register_companies
from .container import BranchContainers
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_account, list_tables
from .database.registry import DatabaseRegistry, branch_db_configs
from .departments.controller import register as register_departments
from .notifications.controller import register as register_notifications
from .pages.controller import register as register_pages
from .ranks.controller import register as register_ranks
from .salaries.controller import register as register_salaries
from .salary_records.controller import register as register_salary_records
from .staff.controller import register as register_staff

ROOT_DIR = Path(__file__).resolve().parents[3]

logger = get_logger(__name__)


def bootstrap_databases(settings: Settings) -> None:
    """Create schema and seed rows in every branch database, as configured."""

    schema_path = ROOT_DIR / "database" / "schema.sql"
    seed_path = ROOT_DIR / "database" / "seed.sql"
    for target in branch_db_configs(settings.db):
        if settings.db.auto_init:
            apply_schema(target, schema_path=schema_path)
            logger.debug(
                f"schema ready on {target.describe()}",
                extra={"db_name": target.database, "tables": len(list_tables(target))},
            )
        if settings.db.auto_seed:
            apply_seed_sql(target, seed_path=seed_path)
            ensure_admin_account(target)


def create_app(settings: Optional[Settings] = None, containers: Optional[BranchContainers] = None) -> Flask:
    load_dotenv(override=False)
    settings = settings or load_settings()
    setup_logging(settings.log.level, settings.env)

    app = Flask(
        __name__,
        template_folder=str(ROOT_DIR / "views"),
        static_folder=str(ROOT_DIR / "static"),
        static_url_path="/static",
    )
    app.secret_key = settings.server.secret_key
    app.config["DEBUG"] = settings.server.debug
    app.config["HRMS_SETTINGS"] = settings

    logger.info("starting hrms", extra={"settings": settings.redacted()})

    if containers is None:
        bootstrap_databases(settings)
        registry = DatabaseRegistry.from_settings(settings.db)
        containers = BranchContainers.from_registry(registry)
    app.config["HRMS_CONTAINERS"] = containers

    register_request_logging(app)
    register_error_handlers(app)

    register_pages(app, containers)
    register_companies(app, containers)
    register_accounts(app, containers)
    register_departments(app, containers)
    register_ranks(app, containers)
    register_staff(app, containers)
    register_authority(app, containers)
    register_notifications(app, containers)
    register_salaries(app, containers)
    register_salary_records(app, containers)

    return app


def main() -> None:
    app = create_app()
    settings: Settings = app.config["HRMS_SETTINGS"]
    app.run(host=settings.server.host, port=settings.server.port, debug=settings.server.debug)


if __name__ == "__main__":
    main()
