from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel

from linkup.core.enums import ConnectionRequestStatus, ConnectionStatus
from linkup.schemas.user import UserProfilePublic

__all__ = [
    "ConnectionRequestPublic",
    "ConnectionStatusPublic",
]


class ConnectionRequestPublic(SQLModel):
    id: UUID
    sender: UserProfilePublic
    recipient_id: UUID
    status: ConnectionRequestStatus
    created_at: datetime


class ConnectionStatusPublic(SQLModel):
    status: ConnectionStatus
    request_id: UUID | None = None
