from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.config.config_validator import get_config
from app.core.constants import ErrorCodes
from app.dependencies import get_user_service
from app.domain.users.entities import User, UserRole
from app.domain.users.services import UserDomainService
from app.utils.error_handling import AuthenticationError, AuthorizationError
from app.utils.logger import logger

# Tokens are issued by the auth service; this service only verifies them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify the signature and expiry of a bearer token and return its claims.
    """
    config = get_config()
    try:
        return jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError(error_code=ErrorCodes.AUTH_TOKEN_EXPIRED)
    except JWTError as e:
        logger.warning("Rejected bearer token", error=str(e))
        raise AuthenticationError(error_code=ErrorCodes.AUTH_TOKEN_INVALID)


def identity_from_claims(payload: Dict[str, Any]) -> User:
    """Build the caller's identity from token claims (`id` or `sub`, `role`, optional `email`)."""
    raw_id = payload.get("id") or payload.get("sub")
    try:
        user_id = UUID(str(raw_id))
        role = UserRole(payload.get("role"))
    except ValueError:
        raise AuthenticationError(error_code=ErrorCodes.AUTH_TOKEN_INVALID)

    return User(id=user_id, role=role, email=payload.get("email"))


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    user_service: UserDomainService = Depends(get_user_service),
) -> User:
    """
    Dependency to get the current authenticated user
    """
    if not token:
        raise AuthenticationError(error_code=ErrorCodes.AUTH_TOKEN_MISSING)

    identity = identity_from_claims(decode_token(token))
    return await user_service.ensure_user(identity.id, identity.role, identity.email)


async def require_candidate(user: User = Depends(get_current_user)) -> User:
    if not user.is_candidate:
        raise AuthorizationError(required_role=UserRole.CANDIDATE.value)
    return user


async def require_employer(user: User = Depends(get_current_user)) -> User:
    if not user.is_employer:
        raise AuthorizationError(required_role=UserRole.EMPLOYER.value)
    return user
