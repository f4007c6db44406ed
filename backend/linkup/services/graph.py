"""
Maintenance of the symmetric connection graph.

Each connection is stored as two directed edges. Both edges are written in the
caller's transaction, so a failure between the two writes rolls back both and
never leaves an asymmetric edge behind.
"""

from logging import getLogger
from uuid import UUID

from sqlmodel import Session

from linkup.converters import user as user_converters
from linkup.crud import connection as connection_crud
from linkup.crud import user as user_crud
from linkup.exceptions.base import AppError
from linkup.models.auth_schemas import Message
from linkup.schemas.user import UserProfilePublic

logger = getLogger(__name__)


def link_users(*, session: Session, user_id: UUID, other_id: UUID) -> None:
    """
    Add each user to the other's connection set. Idempotent.
    Flushes but does not commit; the caller owns the transaction.
    """
    connection_crud.add_connection(
        session=session, user_id=user_id, connection_id=other_id
    )
    connection_crud.add_connection(
        session=session, user_id=other_id, connection_id=user_id
    )


def unlink_users(*, session: Session, user_id: UUID, other_id: UUID) -> None:
    """
    Remove each user from the other's connection set. Missing edges are ignored.
    Flushes but does not commit; the caller owns the transaction.
    """
    connection_crud.remove_connection(
        session=session, user_id=user_id, connection_id=other_id
    )
    connection_crud.remove_connection(
        session=session, user_id=other_id, connection_id=user_id
    )


def remove_connection(
    *,
    session: Session,
    current_user_id: UUID,
    connection_id: UUID,
) -> Message:
    """
    Remove the connection between current_user_id and connection_id.
    Succeeds when no connection exists.
    Raises:
        AppError: For any (unexpected) store errors.
    """
    try:
        unlink_users(session=session, user_id=current_user_id, other_id=connection_id)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("User %s removed connection with %s", current_user_id, connection_id)
    return Message(message="Connection removed successfully.")


def get_connections(*, session: Session, user_id: UUID) -> list[UserProfilePublic]:
    """
    Get the public profiles of every user connected to user_id.
    Raises:
        AppError: For any (unexpected) store errors.
    """
    try:
        users = user_crud.get_connections(session=session, user_id=user_id)
        return [
            user_converters.to_profile_public(user, session=session) for user in users
        ]
    except Exception as e:
        raise AppError from e
