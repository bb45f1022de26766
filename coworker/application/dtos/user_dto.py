# coworker/application/dtos/user_dto.py

"""
Schemas for user data.

Pydantic DTOs for validating and serializing users, including
registration, login and the login response.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from coworker.application.dtos.base_dto import CustomBaseModel
from coworker.shared.utils.input_validation import InputValidator


class UserCreate(CustomBaseModel):
    """
    Schema for registering a new user.
    """
    first_name: str = Field(..., description="First name, letters only.")
    last_name: str = Field(..., description="Last name, letters only.")
    email: EmailStr = Field(..., description="Login email. Must be unique.")
    password: str = Field(..., description=f"Password, at least {InputValidator.MIN_PASSWORD_LENGTH} characters.")

    @field_validator("first_name", "last_name")
    def validate_names(cls, v):
        """
        Reject names with spaces, digits, punctuation or symbols.

        Raises:
            ValueError: If the name is invalid
        """
        is_valid, error_msg = InputValidator.validate_person_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("password")
    def validate_password_security(cls, v):
        is_valid, error_msg = InputValidator.validate_password(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserOutput(CustomBaseModel):
    """
    Schema for returning user data without sensitive fields.
    """
    id: UUID = Field(..., description="Unique identifier of the user.")
    first_name: str
    last_name: str
    email: str


class LoginInput(CustomBaseModel):
    """
    Schema for login credentials.
    """
    email: EmailStr = Field(..., description="Login email.")
    password: str = Field(..., min_length=InputValidator.MIN_PASSWORD_LENGTH, description="Password.")


class LoginOutput(CustomBaseModel):
    """
    Schema for a successful login.

    `access_token` is empty in session mode, where the credential
    travels only in the session cookie.
    """
    access_token: Optional[str] = Field(None, description="Signed access token.")
    access_token_expires_at: datetime = Field(..., description="When the credential expires.")
    user: UserOutput
