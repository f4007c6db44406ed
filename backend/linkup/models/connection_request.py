import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Index
from sqlmodel import Column, Field, SQLModel

from linkup.core.enums import ConnectionRequestStatus
from linkup.utils import now_utc

__all__ = [
    "ConnectionRequest",
]


class ConnectionRequest(SQLModel, table=True):
    __tablename__ = "connection_request"  # type: ignore[assignment]
    __table_args__ = (
        Index("ix_connection_request_recipient_status", "recipient_id", "status"),
        Index("ix_connection_request_sender_recipient", "sender_id", "recipient_id"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    sender_id: uuid.UUID = Field(foreign_key="user.id", ondelete="CASCADE")
    recipient_id: uuid.UUID = Field(foreign_key="user.id", ondelete="CASCADE")
    status: ConnectionRequestStatus = Field(
        default=ConnectionRequestStatus.PENDING,
        sa_column=Column(
            SAEnum(ConnectionRequestStatus, native_enum=False), nullable=False
        ),
    )
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
