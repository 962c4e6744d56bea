from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.core.exceptions import ForbiddenError, MissingTokenError
from storefront.core.security import Identity, decode_access_token
from storefront.db.session import get_session
from storefront.models.user import Token, UserCreate, UserLogin
from storefront.services.auth import AuthService

router = APIRouter()

# Raw token in the Authorization header; a "Bearer " prefix is tolerated
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_auth_service(request: Request, session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session, request.app.state.settings, request.app.state.pwd_context)


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    user = service.register_user(user_in.username, user_in.password, user_in.role)
    return Token(token=service.issue_token(user))

@router.post("/login", response_model=Token)
def login(credentials: UserLogin, service: AuthService = Depends(get_auth_service)):
    user = service.authenticate_user(credentials.username, credentials.password)
    return Token(token=service.issue_token(user))


def get_current_user(
    token: Optional[str] = Depends(token_header),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if not token:
        raise MissingTokenError()
    if token.startswith("Bearer "):
        token = token[len("Bearer "):]
    return decode_access_token(token, settings)

def require_admin(current_user: Identity = Depends(get_current_user)) -> Identity:
    if not current_user.is_admin:
        raise ForbiddenError()
    return current_user
