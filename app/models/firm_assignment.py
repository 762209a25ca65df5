from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class FirmAssignment(Base, TimestampMixin):
    """
    User x Firm edge carrying the user's role inside that firm.

    The (user_id, firm_id) pair is unique: removing a user from a firm
    deactivates the row and reassigning reactivates it, so a user holds
    at most one active role per firm.
    """
    __tablename__ = "firm_assignment"
    __table_args__ = (
        UniqueConstraint("user_id", "firm_id", name="uq_firm_assignment_user_firm"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    firm_id = Column(Integer, ForeignKey("firm.id"), nullable=False, index=True)
    # Stored as text; parsed into Role when read so unknown values fail closed
    role = Column(String, nullable=False)
    access_level = Column(String, nullable=False, default="standard")
    is_active = Column(Boolean, nullable=False, default=True)
    assigned_by = Column(Integer, ForeignKey("user.id"), nullable=True)

    user = relationship("User", back_populates="firm_assignments", foreign_keys=[user_id])
    firm = relationship("Firm", back_populates="assignments")
