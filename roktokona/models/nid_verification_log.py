from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from roktokona.database.database import Base


class NidVerificationLog(Base):
    __tablename__ = "nid_verification_logs"

    id = Column(Integer, primary_key=True, index=True)
    donor_id = Column(Integer, ForeignKey("donors.id"), nullable=False, index=True)
    verified_by = Column(String, nullable=True)
    verification_date = Column(DateTime(timezone=True), server_default=func.now())
    nid_number = Column(String(17), nullable=False)
