from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import List, Literal, Optional

# ======================
# TOKEN SCHEMAS
# ======================

class Token(BaseModel):
    access_token: str
    token_type: str
    role: str

class TokenData(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None
    purpose: Optional[str] = None
    fingerprint: Optional[str] = None


# ======================
# USER AUTHENTICATION SCHEMAS
# ======================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class RegisterRequest(BaseModel):
    full_name: str = Field(..., min_length=1)
    email: EmailStr
    # Bcrypt limit is 72 bytes; max_length=72 prevents the "password too long" crash
    password: str = Field(..., min_length=6, max_length=72)
    role: Literal["student", "mentor"] = "student"

    # Mentor-only profile fields
    bio: Optional[str] = None
    expertise: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    experience_years: int = Field(0, ge=0)
    hourly_rate: Optional[float] = Field(None, ge=0)


# ======================
# PASSWORD RESET SCHEMAS
# ======================

class PasswordResetRequest(BaseModel):
    email: EmailStr

class PasswordResetConfirm(BaseModel):
    token: str
    new_password: str = Field(..., min_length=6, max_length=72)


# ======================
# IDENTITY
# ======================

class UserOut(BaseModel):
    id: int
    email: str
    full_name: str
    role: Literal["student", "mentor"]
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
