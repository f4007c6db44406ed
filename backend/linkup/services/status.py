from uuid import UUID

from sqlmodel import Session

from linkup.core.enums import ConnectionStatus
from linkup.crud import connection as connection_crud
from linkup.crud import connection_request as connection_request_crud
from linkup.exceptions.base import AppError
from linkup.schemas.connection_request import ConnectionStatusPublic


def get_connection_status(
    *,
    session: Session,
    current_user_id: UUID,
    target_user_id: UUID,
) -> ConnectionStatusPublic:
    """
    Resolve the relationship between the current user and a target user.

    An existing connection wins over any stale pending request. Otherwise the
    direction of a pending request between the pair decides between
    "pending" (sent by the current user) and "received" (sent by the target,
    returned with the request id so the caller can act on it).

    Parameters:
        session (Session): The database session.
        current_user_id (UUID): The ID of the user asking.
        target_user_id (UUID): The ID of the other user.
    Returns:
        ConnectionStatusPublic: The resolved status.
    Raises:
        AppError: For any (unexpected) store errors.
    """
    try:
        if connection_crud.are_users_connected(
            session=session,
            user_id=current_user_id,
            connection_id=target_user_id,
        ):
            return ConnectionStatusPublic(status=ConnectionStatus.CONNECTED)

        request = connection_request_crud.get_pending_request_between(
            session=session,
            user_id=current_user_id,
            other_id=target_user_id,
        )
    except Exception as e:
        raise AppError from e

    if request is None:
        return ConnectionStatusPublic(status=ConnectionStatus.NOT_CONNECTED)
    if request.sender_id == current_user_id:
        return ConnectionStatusPublic(status=ConnectionStatus.PENDING)
    return ConnectionStatusPublic(
        status=ConnectionStatus.RECEIVED,
        request_id=request.id,
    )
