import uuid
from datetime import datetime

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import Column, Field, SQLModel

from linkup.utils import now_utc

__all__ = [
    "UserBase",
    "UserCreate",
    "User",
]


# Shared properties
class UserBase(SQLModel):
    email: EmailStr = Field(unique=True, index=True, max_length=255)
    username: str = Field(unique=True, index=True, min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    headline: str = Field(default="LinkUp User", max_length=255)
    profile_picture: str = Field(default="", max_length=1024)
    location: str = Field(default="Earth", max_length=255)
    about: str = Field(default="")
    is_active: bool = Field(default=True)


# Properties to receive on creation
class UserCreate(UserBase):
    pass


# Database model, database table inferred from class name
class User(UserBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
