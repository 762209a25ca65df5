from sqlalchemy import Column, Integer, String, ForeignKey
from app.database import Base, TimestampMixin

class Owner(Base, TimestampMixin):
    __tablename__ = "owner"

    id = Column(Integer, primary_key=True, index=True)
    firm_id = Column(Integer, ForeignKey("firm.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
