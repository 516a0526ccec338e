from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON
from roktokona.database.database import Base
from roktokona.utils.formatting import utcnow


class Donor(Base):
    __tablename__ = "donors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    dob = Column(String, nullable=True)
    blood_type = Column(String(3), nullable=False, index=True)
    gender = Column(String, nullable=False)
    address = Column(String, nullable=True)
    city = Column(String, nullable=False)
    zip_code = Column(String, nullable=True)
    nid_number = Column(String(17), nullable=True)
    nid_verified = Column(Boolean, nullable=False, default=False)
    # Verification payload, JSON text in the table and a dict in Python
    nid_data = Column(JSON(none_as_null=True), nullable=True)
    registration_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    status = Column(String, nullable=False, default="Active")
    registered_by = Column(String, nullable=False, default="user")
