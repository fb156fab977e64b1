from pydantic import BaseModel

from typing import Optional


# Fields are optional so that missing values reach the service and are
# reported as "can't be blank" rather than as generic validation errors.
class NewUser(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    image: Optional[str] = None
    demo: Optional[bool] = None


class LoginUser(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateUser(BaseModel):
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None


# Request envelopes: {"user": {...}}
class NewUserRequest(BaseModel):
    user: NewUser


class LoginUserRequest(BaseModel):
    user: LoginUser


class UpdateUserRequest(BaseModel):
    user: UpdateUser


class AuthUser(BaseModel):
    email: str
    username: str
    bio: Optional[str] = None
    image: Optional[str] = None
    token: str


class UserResponse(BaseModel):
    user: AuthUser
