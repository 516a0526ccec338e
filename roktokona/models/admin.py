from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from roktokona.database.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    # Plaintext, carried over from the legacy admin table
    password = Column(String, nullable=False)
    email = Column(String, nullable=False)
    name = Column(String, nullable=True)
    role = Column(String, nullable=False, default="admin")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
