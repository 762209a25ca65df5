from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.user import PasswordChange, ProfileUpdate
from app.core.security import create_access_token, verify_password
from app.core.logging_config import logger


class AuthService:
    """Login and self-service account operations."""

    def authenticate(self, db: Session, credential: str, password: str) -> User:
        """
        Check a credential (e-mail or username) and password.

        Unknown users and wrong passwords get the same response.

        Raises:
            HTTPException 401: invalid credentials or deactivated account
        """
        db_user = user_crud.get_by_credential(db, credential=credential)

        if not db_user or not verify_password(password, db_user.hashed_password):
            logger.warning(f"Login rejected: credential={credential}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        if not db_user.is_active:
            logger.warning(f"Login rejected for inactive user: user_id={db_user.id}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Account is deactivated",
            )

        logger.info(f"User login successful: user_id={db_user.id}, type={db_user.user_type}")
        return db_user

    def issue_token(self, db_user: User) -> str:
        # Firm selection is never carried in the token
        return create_access_token(
            data={
                "sub": str(db_user.id),
                "username": db_user.username,
                "email": db_user.email,
                "user_type": db_user.user_type,
            }
        )

    def update_profile(self, db: Session, db_user: User, profile: ProfileUpdate) -> User:
        update_data = profile.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No valid fields provided for update"
            )
        return user_crud.update(db, db_user=db_user, update_data=update_data)

    def change_password(self, db: Session, db_user: User, change: PasswordChange) -> None:
        if change.new_password != change.confirm_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="New password and confirmation do not match"
            )
        if not verify_password(change.current_password, db_user.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is incorrect"
            )

        user_crud.set_password(db, db_user=db_user, password=change.new_password)
        logger.info(f"Password changed: user_id={db_user.id}")


# Create a singleton instance
auth_service = AuthService()
