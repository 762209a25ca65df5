from sqlalchemy import Column, Integer, String, Boolean, Text
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class Firm(Base, TimestampMixin):
    __tablename__ = "firm"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    # Firms are deactivated, never deleted, while assignments reference them
    is_active = Column(Boolean, nullable=False, default=True)

    assignments = relationship("FirmAssignment", back_populates="firm")
