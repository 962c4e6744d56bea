from typing import Optional

import structlog
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from storefront.core.config import Settings
from storefront.core.exceptions import AuthError, ConflictError
from storefront.core.security import Identity, create_access_token, get_password_hash, verify_password
from storefront.models.user import User, UserRole

logger = structlog.get_logger(__name__)


class AuthService:
    def __init__(self, session: Session, settings: Settings, pwd_context: CryptContext):
        self.session = session
        self.settings = settings
        self.pwd_context = pwd_context

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.username == username)).first()

    def issue_token(self, user: User) -> str:
        return create_access_token(Identity(id=user.id, role=user.role), self.settings)

    def register_user(self, username: str, password: str, role: UserRole = UserRole.CUSTOMER) -> User:
        if self.get_user_by_username(username):
            raise ConflictError("Username already registered")

        user = User(
            username=username,
            password_hash=get_password_hash(self.pwd_context, password),
            role=role,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same name
            self.session.rollback()
            raise ConflictError("Username already registered")
        self.session.refresh(user)

        logger.info("user_registered", user_id=user.id, role=user.role.value)
        return user

    def authenticate_user(self, username: str, password: str) -> User:
        """
        Return the user for a username/password pair.

        Unknown usernames and wrong passwords raise the same AuthError so
        callers cannot probe which usernames exist.
        """
        user = self.get_user_by_username(username)
        if not user or not verify_password(self.pwd_context, password, user.password_hash):
            logger.info("login_failed", username=username)
            raise AuthError()
        return user
