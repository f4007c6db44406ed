from uuid import UUID

from sqlmodel import Session

from linkup.models.connection import Connection


def add_connection(
    *,
    session: Session,
    user_id: UUID,
    connection_id: UUID,
) -> bool:
    """
    Add connection_id to the connection set of user_id.
    Only one direction of the edge is written; adding an existing member is a no-op.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The user whose connection set is updated.
        connection_id (UUID): The user to add to the set.
    Returns:
        bool: True if the edge was added, False if it was already present.
    Raises:
        IntegrityError: If either user does not exist in the database.
    """
    if session.get(Connection, (user_id, connection_id)) is not None:
        return False
    session.add(Connection(user_id=user_id, connection_id=connection_id))
    session.flush()
    return True


def remove_connection(
    *,
    session: Session,
    user_id: UUID,
    connection_id: UUID,
) -> bool:
    """
    Remove connection_id from the connection set of user_id.
    Removing an absent member is a no-op.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The user whose connection set is updated.
        connection_id (UUID): The user to remove from the set.
    Returns:
        bool: True if an edge was removed, False if none existed.
    """
    edge = session.get(Connection, (user_id, connection_id))
    if edge is None:
        return False
    session.delete(edge)
    session.flush()
    return True


def are_users_connected(
    *,
    session: Session,
    user_id: UUID,
    connection_id: UUID,
) -> bool:
    """
    Check if connection_id is in the connection set of user_id.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the first user.
        connection_id (UUID): The ID of the second user.
    Returns:
        bool: True if the edge exists, False otherwise.
    """
    return session.get(Connection, (user_id, connection_id)) is not None
