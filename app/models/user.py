from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class User(Base, TimestampMixin):
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    # One of the Role names; "admin" marks a platform administrator
    user_type = Column(String, nullable=False, default="tenant")
    phone = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_verified = Column(Boolean, nullable=False, default=False)
    preferred_language = Column(String, nullable=False, default="en")
    timezone = Column(String, nullable=False, default="UTC")

    firm_assignments = relationship(
        "FirmAssignment",
        back_populates="user",
        foreign_keys="FirmAssignment.user_id",
    )
