from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from roktokona.database.database import Base


class BloodRequest(Base):
    __tablename__ = "blood_requests"

    id = Column(Integer, primary_key=True, index=True)
    patient_name = Column(String, nullable=False)
    blood_type = Column(String(3), nullable=False)
    units = Column(Integer, nullable=False)
    hospital = Column(String, nullable=False)
    contact_person = Column(String, nullable=False)
    contact_phone = Column(String, nullable=False)
    urgency = Column(String, default="Normal")
    status = Column(String, default="Pending")
    request_date = Column(DateTime(timezone=True), server_default=func.now())
    fulfilled_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
