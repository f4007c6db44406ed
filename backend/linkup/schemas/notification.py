from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel

from linkup.core.enums import NotificationType

__all__ = [
    "NotificationPublic",
]


class NotificationPublic(SQLModel):
    id: UUID
    type: NotificationType
    related_user_id: UUID
    read: bool
    created_at: datetime
