import logging
from typing import List

from sqlalchemy import case, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roktokona.core.exceptions import StoreError
from roktokona.models.blood_inventory import BloodInventory, BLOOD_TYPES
from roktokona.utils.formatting import utcnow

logger = logging.getLogger(__name__)

INVENTORY_LOAD_FAILED_MESSAGE = "রক্তের মজুদ লোড করতে সমস্যা হয়েছে"


class InventoryRowMissing(Exception):
    """No inventory row exists for the blood type being counted."""


def increment_units(db: Session, blood_type: str) -> None:
    """
    Add one unit to a blood type inside the caller's transaction.

    The increment is a single ``UPDATE ... SET units = units + 1`` so the
    store serialises concurrent registrations. Does not commit.
    """
    result = db.execute(
        update(BloodInventory)
        .where(BloodInventory.blood_type == blood_type)
        .values(units=BloodInventory.units + 1, last_updated=utcnow())
    )
    if result.rowcount != 1:
        raise InventoryRowMissing(f"No inventory row for blood type {blood_type!r}")


def list_inventory(db: Session) -> List[BloodInventory]:
    """Inventory rows in canonical blood-type order."""
    ordering = case(
        {blood_type: position for position, blood_type in enumerate(BLOOD_TYPES)},
        value=BloodInventory.blood_type,
        else_=len(BLOOD_TYPES),
    )
    try:
        return list(db.scalars(select(BloodInventory).order_by(ordering, BloodInventory.blood_type)))
    except SQLAlchemyError as e:
        logger.error(f"Failed to load blood inventory: {e}")
        raise StoreError(INVENTORY_LOAD_FAILED_MESSAGE) from e
