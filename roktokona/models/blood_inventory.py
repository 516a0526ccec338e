from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from roktokona.database.database import Base
from roktokona.utils.formatting import utcnow
import enum


class BloodType(str, enum.Enum):
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"


# Seed and display order
BLOOD_TYPES = [blood_type.value for blood_type in BloodType]


class BloodInventory(Base):
    __tablename__ = "blood_inventory"
    __table_args__ = (
        CheckConstraint("units >= 0", name="ck_blood_inventory_units_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    blood_type = Column(String(3), unique=True, nullable=False, index=True)
    units = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime(timezone=True), nullable=False, default=utcnow)
