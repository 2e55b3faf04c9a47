"""Pydantic v2 request/response schemas for profile endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileCreate(BaseModel):
    """Schema for creating the caller's profile."""

    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    username: str = Field(..., min_length=2, max_length=100)
    email: EmailStr


class ProfileUpdate(BaseModel):
    """Schema for partially updating a profile. All fields optional."""

    first_name: str | None = Field(None, min_length=2, max_length=100)
    last_name: str | None = Field(None, min_length=2, max_length=100)
    username: str | None = Field(None, min_length=2, max_length=100)
    profile_image: str | None = Field(None, max_length=512)


class ProfileResponse(BaseModel):
    """Profile as returned by the API."""

    id: uuid.UUID
    first_name: str
    last_name: str
    username: str
    email: str
    profile_image: str | None = None
    is_admin: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
