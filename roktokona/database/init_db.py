"""Idempotent schema creation and seeding run at application startup."""
import logging
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from roktokona.core.config import Settings
from roktokona.database.database import Database
from roktokona.models.admin import Admin
from roktokona.models.blood_inventory import BloodInventory, BLOOD_TYPES

logger = logging.getLogger(__name__)


def insert_if_absent(db: Session, model, rows: List[Dict], conflict_columns: Sequence[str]) -> int:
    """
    Insert rows, silently skipping any that collide on a unique constraint.

    Uses the dialect's ``ON CONFLICT DO NOTHING`` so the check and the insert
    are a single statement. Returns the number of rows actually inserted.
    """
    if not rows:
        return 0

    dialect = db.get_bind().dialect.name
    if dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    elif dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    else:
        raise ValueError(f"insert_if_absent is not supported for dialect '{dialect}'")

    stmt = insert(model).values(rows).on_conflict_do_nothing(index_elements=list(conflict_columns))
    result = db.execute(stmt)
    return max(result.rowcount or 0, 0)


def seed_default_admin(db: Session, settings: Settings) -> bool:
    """Create the default admin unless one with the same username exists."""
    inserted = insert_if_absent(
        db,
        Admin,
        [{
            "username": settings.DEFAULT_ADMIN_USERNAME,
            "password": settings.DEFAULT_ADMIN_PASSWORD,
            "email": settings.DEFAULT_ADMIN_EMAIL,
            "name": settings.DEFAULT_ADMIN_NAME,
            "role": "admin",
        }],
        conflict_columns=["username"],
    )
    return inserted > 0


def seed_blood_inventory(db: Session) -> int:
    """Ensure one zero-count inventory row exists per canonical blood type."""
    rows = [{"blood_type": blood_type, "units": 0} for blood_type in BLOOD_TYPES]
    return insert_if_absent(db, BloodInventory, rows, conflict_columns=["blood_type"])


def init_db(database: Database, settings: Settings) -> None:
    """Create tables and seed fixed data. Safe to call repeatedly."""
    database.create_all()

    db = database.session()
    try:
        if seed_default_admin(db, settings):
            logger.info(f"Default admin '{settings.DEFAULT_ADMIN_USERNAME}' created")
        created = seed_blood_inventory(db)
        if created:
            logger.info(f"Seeded {created} blood inventory row(s)")
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    logger.info("Database tables are ready")
