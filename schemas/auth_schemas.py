"""
Zero Waste Chef Authentication Schemas
Pydantic models for authentication requests and responses
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str = Field(..., min_length=4, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=100)
    family_name: str = Field(..., min_length=1, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=50)
    profession: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=150)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Usernames double as login handles, so no surrounding whitespace"""
        if v != v.strip():
            raise ValueError('Username must not start or end with whitespace')
        return v

    @field_validator('phone_number', 'profession', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class UserLogin(BaseModel):
    """Schema for user login"""
    model_config = ConfigDict(populate_by_name=True)

    username_or_email: str = Field(..., min_length=1, alias="usernameOrEmail")
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Session token returned after login or registration"""
    token: str


class PasswordResetRequest(BaseModel):
    """Schema for password reset request"""
    email: EmailStr


class PasswordResetLink(BaseModel):
    """Reset token handed back in place of an e-mailed link"""
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Reset link generated"
    reset_token: str = Field(..., alias="resetToken")


class PasswordReset(BaseModel):
    """Schema for password reset"""
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128, alias="newPassword")


class DuplicateCheck(BaseModel):
    """Username/email availability probe used by the registration form"""
    username: Optional[str] = None
    email: Optional[str] = None


class DuplicateCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username_exists: bool = Field(..., alias="usernameExists")
    email_exists: bool = Field(..., alias="emailExists")


class IdentityContext(BaseModel):
    """Identity recovered from a verified token"""
    id: int
    username: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
