"""
User account operations: sign-up, login, current-user lookup and
profile updates.

Each operation returns the public user record with a freshly issued
``token``, or raises HttpException with an ``{"errors": {...}}`` payload.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .auth import create_access_token, hash_password, verify_password
from .errors import HttpException, blank_fields_error, taken_fields_error
from .models import User
from .schemas import LoginUser, NewUser, UpdateUser

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _blank_fields(**fields: Optional[str]) -> List[str]:
    return [name for name, value in fields.items() if _is_blank(value)]


def _with_token(user: User) -> dict:
    return {**user.to_dict(), "token": create_access_token(user.id)}


def _taken_fields(db: Session, email: Optional[str], username: Optional[str], exclude_id: Optional[int] = None) -> List[str]:
    taken = []
    for field, column, value in (("email", User.email, email), ("username", User.username, username)):
        if value is None:
            continue
        query = db.query(User.id).filter(column == value)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            taken.append(field)
    return taken


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HttpException(404, {"user": ["not found"]})
    return user


def _commit(db: Session, user: User, email: Optional[str], username: Optional[str]) -> None:
    """
    Commit a pending insert/update of ``user``.

    A unique-constraint violation that slipped past the pre-check (two
    requests racing for the same email or username) is reported as the
    usual "has already been taken" error.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        taken = _taken_fields(db, email, username, exclude_id=user.id) or ["email"]
        logger.info("Uniqueness conflict on %s: %s", ", ".join(taken), exc.orig)
        raise taken_fields_error(taken) from exc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to persist user %s", username or user.id)
        raise
    db.refresh(user)


def create_user(payload: NewUser, db: Session) -> dict:
    blank = _blank_fields(username=payload.username, email=payload.email, password=payload.password)
    if blank:
        raise blank_fields_error(blank)

    email = payload.email.strip()
    username = payload.username.strip()

    taken = _taken_fields(db, email, username)
    if taken:
        raise taken_fields_error(taken)

    user = User(
        username=username,
        email=email,
        password=hash_password(payload.password),
    )
    if payload.image:
        user.image = payload.image
    if payload.demo:
        user.demo = payload.demo

    db.add(user)
    _commit(db, user, email, username)

    logger.info("User created: user_id=%s username=%s", user.id, user.username)
    return _with_token(user)


def login(payload: LoginUser, db: Session) -> dict:
    blank = _blank_fields(email=payload.email, password=payload.password)
    if blank:
        raise blank_fields_error(blank)

    email = payload.email.strip()
    user = db.query(User).filter(User.email == email).first()

    # Unknown email and wrong password produce the same error, and both run
    # bcrypt, so neither the response nor its timing reveals whether an
    # account exists.
    if not verify_password(payload.password, user.password if user else None):
        logger.info("Login failure: email=%s", email)
        raise HttpException(403, {"email or password": ["is invalid"]})

    logger.info("Login success: user_id=%s username=%s", user.id, user.username)
    return _with_token(user)


def get_current_user(user_id: int, db: Session) -> dict:
    return _with_token(_get_user(db, user_id))


def update_user(payload: UpdateUser, user_id: int, db: Session) -> dict:
    """
    Apply profile changes to an existing user.

    email, username and password are only changed when a non-blank value
    is supplied. bio and image are changed whenever the client sent them,
    so an explicit null clears them. A new password is hashed before it is
    stored.

    Args:
        payload: Fields to change
        user_id: Id of the user being updated (taken from their token)
        db: Database session

    Returns:
        The updated public user record with a fresh token

    Raises:
        HttpException: 404 if the user does not exist, 422 if the new email
            or username belongs to another user
    """
    user = _get_user(db, user_id)
    sent = payload.model_fields_set

    email = None if _is_blank(payload.email) else payload.email.strip()
    username = None if _is_blank(payload.username) else payload.username.strip()

    taken = _taken_fields(db, email, username, exclude_id=user.id)
    if taken:
        raise taken_fields_error(taken)

    if email is not None:
        user.email = email
    if username is not None:
        user.username = username
    if not _is_blank(payload.password):
        user.password = hash_password(payload.password)
    if "bio" in sent:
        user.bio = payload.bio
    if "image" in sent:
        user.image = payload.image

    _commit(db, user, email, username)

    logger.info("User updated: user_id=%s fields=%s", user.id, ",".join(sorted(sent)))
    return _with_token(user)
