# coworker/application/dtos/member_dto.py

"""
Schemas for member data.

Pydantic DTOs for validating and serializing members, including the
paginated listing envelope.
"""

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field, field_validator

from coworker.application.dtos.base_dto import CustomBaseModel


class MemberCreate(CustomBaseModel):
    """
    Schema for creating a member.
    """
    first_name: str = Field(..., min_length=1, description="Member's first name.")
    last_name: str = Field(..., min_length=1, description="Member's last name.")
    email: Optional[EmailStr] = Field(None, description="Contact email, optional.")

    @field_validator("email", mode="before")
    def empty_email_is_none(cls, v):
        # An empty string means "no email"
        if isinstance(v, str) and not v.strip():
            return None
        return v


class MemberUpdate(CustomBaseModel):
    """
    Schema for updating a member.

    Missing or empty fields keep their current value.
    """
    first_name: Optional[str] = Field(None, description="New first name.")
    last_name: Optional[str] = Field(None, description="New last name.")
    email: Optional[EmailStr] = Field(None, description="New contact email.")

    @field_validator("first_name", "last_name", "email", mode="before")
    def empty_is_unchanged(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def changes(self) -> dict:
        """Fields that carry a new value."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


class MemberOutput(CustomBaseModel):
    """
    Schema for returning member data.
    """
    id: UUID = Field(..., description="Unique identifier of the member.")
    first_name: str
    last_name: str
    email: Optional[str] = None
    created_at: datetime


class MemberListMeta(CustomBaseModel):
    page_id: int
    page_size: int
    page_count: int
    total_count: int


class MemberListOutput(CustomBaseModel):
    """
    Schema for one page of members.
    """
    meta: MemberListMeta
    data: List[MemberOutput]
