"""
Users Router - registration, login and profile endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import service
from ..auth import get_current_user_id
from ..db import get_db
from ..schemas import LoginUserRequest, NewUserRequest, UpdateUserRequest, UserResponse

router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: NewUserRequest, db: Session = Depends(get_db)):
    user = service.create_user(payload.user, db)
    return {"user": user}


@router.post("/users/login", response_model=UserResponse)
def login(payload: LoginUserRequest, db: Session = Depends(get_db)):
    user = service.login(payload.user, db)
    return {"user": user}


@router.get("/user", response_model=UserResponse)
def current_user(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """
    Get the authenticated user.
    Requires a JWT in the Authorization header ("Token <jwt>" or "Bearer <jwt>").
    """
    user = service.get_current_user(user_id, db)
    return {"user": user}


@router.put("/user", response_model=UserResponse)
def update_user(
    payload: UpdateUserRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = service.update_user(payload.user, user_id, db)
    return {"user": user}
