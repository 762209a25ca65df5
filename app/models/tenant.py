from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from app.database import Base, TimestampMixin

class Tenant(Base, TimestampMixin):
    """A renter occupying a property; scoped to the managing firm."""
    __tablename__ = "tenant"

    id = Column(Integer, primary_key=True, index=True)
    firm_id = Column(Integer, ForeignKey("firm.id"), nullable=False, index=True)
    property_id = Column(Integer, ForeignKey("property.id"), nullable=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    # Move-outs deactivate the row; leases and payments still reference it
    is_active = Column(Boolean, nullable=False, default=True)
