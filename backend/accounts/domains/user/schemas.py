"""User domain Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime


class UserBase(BaseModel):
    """Core identity fields, all required."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class UserCreate(UserBase):
    """Schema for user creation."""

    password: str = Field(..., min_length=1)
    address: Optional[str] = Field(None, max_length=500)


class UserUpdate(UserCreate):
    """
    Schema for user updates.

    Full replacement: every core field and the password must be sent again.
    Leaving out address removes the stored one.
    """


class UserResponse(BaseModel):
    """User as returned to clients; address only when a details row exists."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def to_payload(self) -> dict:
        payload = self.model_dump(mode="json")
        if payload["address"] is None:
            payload.pop("address")
        return payload


class UserAuthenticate(BaseModel):
    """Schema for token issuance."""

    email: EmailStr
    password: str = Field(..., min_length=1)
    token_name: str = Field(..., min_length=1, max_length=255)
