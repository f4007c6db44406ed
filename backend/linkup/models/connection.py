from uuid import UUID

from sqlmodel import Field, SQLModel

__all__ = [
    "Connection",
]


# One directed edge of the symmetric connection graph. A user's connection
# set is every connection_id stored under their user_id.
class Connection(SQLModel, table=True):
    user_id: UUID = Field(foreign_key="user.id", primary_key=True, ondelete="CASCADE")
    connection_id: UUID = Field(
        foreign_key="user.id", primary_key=True, ondelete="CASCADE"
    )
