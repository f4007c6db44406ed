from uuid import UUID

from sqlmodel import Field, SQLModel

__all__ = [
    "UserProfilePublic",
]


class UserProfilePublic(SQLModel):
    id: UUID
    name: str
    username: str
    profile_picture: str
    headline: str
    connections: list[UUID] = Field(default_factory=list)
