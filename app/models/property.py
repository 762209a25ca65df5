from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from app.database import Base, TimestampMixin

class Property(Base, TimestampMixin):
    __tablename__ = "property"

    id = Column(Integer, primary_key=True, index=True)
    firm_id = Column(Integer, ForeignKey("firm.id"), nullable=False, index=True)
    owner_id = Column(Integer, ForeignKey("owner.id"), nullable=True)
    name = Column(String, nullable=False)
    property_type = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    total_units = Column(Integer, nullable=False, default=1)
    is_active = Column(Boolean, nullable=False, default=True)
