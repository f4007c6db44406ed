import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel

from linkup.core.enums import NotificationType
from linkup.utils import now_utc

__all__ = [
    "Notification",
]


class Notification(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    recipient_id: uuid.UUID = Field(
        foreign_key="user.id", ondelete="CASCADE", index=True
    )
    type: NotificationType = Field(
        sa_column=Column(SAEnum(NotificationType, native_enum=False), nullable=False)
    )
    related_user_id: uuid.UUID = Field(foreign_key="user.id", ondelete="CASCADE")
    read: bool = Field(default=False)
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
