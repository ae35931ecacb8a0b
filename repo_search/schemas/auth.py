"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=16)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=16)


class UserResponse(BaseModel):
    """Public user fields. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    email: str
    name: str


class SessionResponse(BaseModel):
    """Issued session token."""

    model_config = ConfigDict(from_attributes=True)

    token: str
    expires_at: int


class RegisterResult(BaseModel):
    user: UserResponse


class LoginResult(BaseModel):
    session: SessionResponse


class RegisterResponse(BaseModel):
    """Registration response envelope."""

    success: bool = True
    result: RegisterResult


class LoginResponse(BaseModel):
    """Login response envelope."""

    success: bool = True
    result: LoginResult


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing JSON endpoint."""

    success: bool = False
    errors: str | list
