from sqlalchemy.orm import Session
from app.crud.user import user as user_crud
from app.models.user import User
from app.core.exceptions import UserInactiveOrNotFound


class UserDirectory:
    """
    Resolve a verified token subject to a live user record.

    Tokens are stateless, so a user deactivated after the token was issued
    is only caught here.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, user_id: int) -> User:
        user = user_crud.get(self.db, user_id=user_id)
        if user is None or not user.is_active:
            raise UserInactiveOrNotFound(user_id=user_id)
        return user
