from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Header
import jwt
import logging

from .config import settings
from .errors import HttpException

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# Authorization header schemes accepted by get_current_user_id
TOKEN_SCHEMES = ("token", "bearer")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if hashed_password is None:
        # no such account: spend the same bcrypt time as a real comparison
        pwd_context.dummy_verify()
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # stored value is not a recognisable hash
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))
    payload = {"user": {"id": user_id}, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[int]:
    """
    Decode a token issued by create_access_token.

    Args:
        token: Encoded JWT

    Returns:
        The user id carried by the token, or None if the token is expired,
        badly signed or does not carry a user id
    """
    try:
        data = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.debug("Rejected token: %s", exc)
        return None

    user = data.get("user")
    user_id = user.get("id") if isinstance(user, dict) else None
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        return None
    return user_id


def get_current_user_id(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> int:
    if not authorization or not authorization.strip():
        raise HttpException(401, {"authorization": ["is missing"]})

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() not in TOKEN_SCHEMES or not token.strip():
        raise HttpException(401, {"token": ["is invalid"]})

    user_id = decode_access_token(token.strip())
    if user_id is None:
        raise HttpException(401, {"token": ["is invalid"]})
    return user_id
