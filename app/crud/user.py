from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import or_, select
from app.models.firm_assignment import FirmAssignment
from app.models.user import User
from app.core.security import get_password_hash
from app.core.tenant_context import FirmContext


class CRUDUser:
    """
    CRUD operations for User model.

    Users are not firm-owned rows, so we don't inherit from CRUDBase.
    Their firm membership lives in FirmAssignment and is scoped there.
    """

    def __init__(self):
        self.model = User

    def get(self, db: Session, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_by_credential(self, db: Session, credential: str) -> Optional[User]:
        """
        Retrieve user by e-mail address or username.

        Args:
            db: Database session
            credential: E-mail or username as typed at login

        Returns:
            User instance or None if not found
        """
        stmt = select(User).where(
            or_(User.email == credential, User.username == credential)
        )
        result = db.execute(stmt)
        return result.scalars().first()

    def get_multi_for_firm(
        self,
        db: Session,
        *,
        context: FirmContext,
        skip: int = 0,
        limit: int = 100
    ) -> List[User]:
        """
        Users visible in the context.

        Membership is the user's active assignment to the acting firm;
        the platform-admin "all firms" context lists every user.
        """
        stmt = select(User)
        if not context.is_all_firms:
            stmt = (
                stmt.join(FirmAssignment, FirmAssignment.user_id == User.id)
                .where(
                    FirmAssignment.firm_id == context.firm_id,
                    FirmAssignment.is_active.is_(True),
                )
            )
        stmt = stmt.order_by(User.id).offset(skip).limit(limit)
        result = db.execute(stmt)
        return list(result.scalars().all())

    def create(
        self,
        db: Session,
        *,
        username: str,
        email: str,
        password: str,
        user_type: str,
        phone: Optional[str] = None,
        preferred_language: str = "en",
        timezone: str = "UTC",
        is_active: bool = True,
        is_verified: bool = False,
        commit: bool = True
    ) -> User:
        """
        Create a new user with hashed password.

        Args:
            commit: Whether to commit immediately; pass False to create the
                user and its firm assignments in one transaction

        Raises:
            ValueError: If the e-mail or username is already taken
        """
        db_user = User(
            username=username,
            email=email,
            hashed_password=get_password_hash(password),
            user_type=user_type,
            phone=phone,
            preferred_language=preferred_language,
            timezone=timezone,
            is_active=is_active,
            is_verified=is_verified,
        )
        db.add(db_user)

        try:
            if commit:
                db.commit()
                db.refresh(db_user)
            else:
                db.flush()  # Get ID without committing
        except IntegrityError as e:
            db.rollback()
            if "unique" in str(e).lower():
                raise ValueError(f"User with email {email} or username {username} already exists")
            raise e

        return db_user

    def set_password(self, db: Session, *, db_user: User, password: str) -> User:
        db_user.hashed_password = get_password_hash(password)
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user

    def update(self, db: Session, *, db_user: User, update_data: dict) -> User:
        for field, value in update_data.items():
            setattr(db_user, field, value)
        db.add(db_user)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if "unique" in str(e).lower():
                raise ValueError("Another user already uses this e-mail address or username")
            raise e
        db.refresh(db_user)
        return db_user


# Create singleton instance
user = CRUDUser()
