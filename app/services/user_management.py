from typing import List
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.crud import firm as firm_crud
from app.crud import firm_assignment as assignment_crud
from app.crud import user as user_crud
from app.models.firm_assignment import FirmAssignment
from app.models.user import User
from app.schemas.firm_assignment import FirmAssignmentCreate
from app.schemas.user import PasswordReset, UserCreate, UserUpdate
from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.core.logging_config import logger


class UserManagementService:
    """
    Admin operations on users and their firm assignments.

    Assignments are the only source of a non-admin user's firm access, so
    every change here takes effect on the user's next request.
    """

    def get_user(self, db: Session, user_id: int) -> User:
        db_user = user_crud.get(db, user_id=user_id)
        if not db_user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        return db_user

    def get_users(self, db: Session, context: FirmContext, skip: int = 0, limit: int = 100) -> List[User]:
        return user_crud.get_multi_for_firm(db, context=context, skip=skip, limit=limit)

    def _get_active_firm(self, db: Session, firm_id: int):
        firm = firm_crud.get(db, firm_id=firm_id)
        if not firm or not firm.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Firm not found or inactive"
            )
        return firm

    def create_user(self, db: Session, user_data: UserCreate, actor: User) -> User:
        """
        Create a user and its initial firm assignments in one transaction.

        Raises:
            ValueError: duplicate e-mail or username
            HTTPException 404: an initial assignment names an unknown or
                inactive firm
        """
        for initial in user_data.firm_assignments:
            self._get_active_firm(db, initial.firm_id)

        db_user = user_crud.create(
            db,
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
            user_type=user_data.user_type.value,
            phone=user_data.phone,
            preferred_language=user_data.preferred_language,
            timezone=user_data.timezone,
            is_verified=user_data.is_verified,
            commit=False,
        )
        try:
            for initial in user_data.firm_assignments:
                assignment_crud.upsert(
                    db,
                    user_id=db_user.id,
                    firm_id=initial.firm_id,
                    role=initial.role.value,
                    access_level=initial.access_level,
                    assigned_by=actor.id,
                    commit=False,
                )
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        db.refresh(db_user)

        logger.info(
            f"User created: id={db_user.id}, type={db_user.user_type}, "
            f"assignments={len(user_data.firm_assignments)}, by user_id={actor.id}"
        )
        return db_user

    def assign_to_firm(
        self,
        db: Session,
        user_id: int,
        assignment_data: FirmAssignmentCreate,
        actor: User
    ) -> FirmAssignment:
        self.get_user(db, user_id)
        self._get_active_firm(db, assignment_data.firm_id)

        assignment = assignment_crud.upsert(
            db,
            user_id=user_id,
            firm_id=assignment_data.firm_id,
            role=assignment_data.role.value,
            access_level=assignment_data.access_level,
            assigned_by=actor.id,
        )
        logger.info(
            f"User assigned to firm: user_id={user_id}, firm_id={assignment.firm_id}, "
            f"role={assignment.role}, by user_id={actor.id}"
        )
        return assignment

    def remove_from_firm(self, db: Session, user_id: int, firm_id: int, actor: User) -> FirmAssignment:
        """
        Deactivate the user's assignment to a firm.

        Raises:
            HTTPException 404: no active assignment to that firm
        """
        assignment = assignment_crud.get(db, user_id=user_id, firm_id=firm_id)
        if not assignment or not assignment.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Active assignment not found"
            )

        assignment = assignment_crud.deactivate(db, db_obj=assignment)
        logger.info(f"User removed from firm: user_id={user_id}, firm_id={firm_id}, by user_id={actor.id}")
        return assignment

    def update_user(self, db: Session, user_id: int, user_data: UserUpdate, actor: User) -> User:
        """
        Update a user's account fields.

        Raises:
            ValueError: e-mail or username taken by another user
            HTTPException 400: an administrator demoting themselves
        """
        db_user = self.get_user(db, user_id)
        update_data = user_data.model_dump(exclude_unset=True)
        if "user_type" in update_data:
            update_data["user_type"] = update_data["user_type"].value
            if db_user.id == actor.id and update_data["user_type"] != Role.admin.value:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Administrators cannot remove their own admin role"
                )

        db_user = user_crud.update(db, db_user=db_user, update_data=update_data)
        logger.info(
            f"User updated: id={db_user.id}, fields={sorted(update_data)}, by user_id={actor.id}"
        )
        return db_user

    def reset_password(self, db: Session, user_id: int, reset: PasswordReset, actor: User) -> None:
        db_user = self.get_user(db, user_id)
        if reset.new_password != reset.confirm_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="New password and confirmation do not match"
            )

        user_crud.set_password(db, db_user=db_user, password=reset.new_password)
        logger.info(f"Password reset: user_id={db_user.id}, by user_id={actor.id}")

    def toggle_status(self, db: Session, user_id: int, actor: User) -> User:
        db_user = self.get_user(db, user_id)
        if db_user.id == actor.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Administrators cannot deactivate their own account"
            )

        db_user = user_crud.update(db, db_user=db_user, update_data={"is_active": not db_user.is_active})
        logger.info(f"User status toggled: id={db_user.id}, is_active={db_user.is_active}, by user_id={actor.id}")
        return db_user


# Create a singleton instance
user_management_service = UserManagementService()
