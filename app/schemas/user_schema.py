from pydantic import BaseModel, EmailStr, Field
from enum import Enum
from typing import Optional
from datetime import datetime


class Role(str, Enum):
    user = "user"
    admin = "admin"


class UserCreate(BaseModel):
    name: str = Field(..., min_length=2, description="Name must be at least 2 characters")
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")


class UserOut(BaseModel):
    id: int
    name: str
    email: EmailStr

    class Config:
        from_attributes = True


class UserProfile(UserOut):
    created_at: datetime


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, description="Password is required")


class AdminLogin(BaseModel):
    password: str = Field(..., min_length=1, description="Password is required")


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: UserOut


class AdminLoginResponse(BaseModel):
    success: bool = True
    token: str


class TokenClaims(BaseModel):
    """Verified content of a session token"""
    subject_id: int
    role: Role
    expires_at: datetime
    email: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str
