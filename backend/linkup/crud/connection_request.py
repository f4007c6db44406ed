from uuid import UUID

from sqlalchemy import and_, or_, update
from sqlmodel import Session, col, select

from linkup.core.enums import ConnectionRequestStatus
from linkup.models.connection_request import ConnectionRequest
from linkup.utils import now_utc


def create_connection_request(
    *,
    session: Session,
    sender_id: UUID,
    recipient_id: UUID,
) -> ConnectionRequest:
    """
    Create a pending connection request from one user to another.
    Existing requests between the pair are not checked, so repeated calls
    create independent pending requests.

    Parameters:
        session (Session): The database session.
        sender_id (UUID): The ID of the user sending the request.
        recipient_id (UUID): The ID of the user receiving the request.
    Returns:
        ConnectionRequest: The created request.
    Raises:
        IntegrityError: If either user does not exist in the database.
    """
    request = ConnectionRequest(sender_id=sender_id, recipient_id=recipient_id)
    session.add(request)
    session.flush()
    return request


def get_connection_request_by_id(
    *,
    session: Session,
    request_id: UUID,
) -> ConnectionRequest | None:
    return session.get(ConnectionRequest, request_id)


def transition_pending_request(
    *,
    session: Session,
    request_id: UUID,
    recipient_id: UUID,
    status: ConnectionRequestStatus,
) -> ConnectionRequest | None:
    """
    Move a pending request to a terminal status with a single conditional update.
    The row is only changed if it still matches id, recipient and pending status,
    so of two concurrent callers at most one gets the request back.

    Parameters:
        session (Session): The database session.
        request_id (UUID): The ID of the request.
        recipient_id (UUID): The user acting on the request; must be its recipient.
        status (ConnectionRequestStatus): The terminal status to set.
    Returns:
        ConnectionRequest | None: The updated request, or None if no pending
        request with that id is addressed to recipient_id.
    """
    stmt = (
        update(ConnectionRequest)
        .where(
            col(ConnectionRequest.id) == request_id,
            col(ConnectionRequest.recipient_id) == recipient_id,
            col(ConnectionRequest.status) == ConnectionRequestStatus.PENDING,
        )
        .values(status=status, updated_at=now_utc())
    )
    result = session.execute(stmt)
    if result.rowcount != 1:  # type: ignore[attr-defined]
        return None
    return session.get(ConnectionRequest, request_id, populate_existing=True)


def get_pending_requests_for_recipient(
    *,
    session: Session,
    recipient_id: UUID,
) -> list[ConnectionRequest]:
    stmt = (
        select(ConnectionRequest)
        .where(
            col(ConnectionRequest.recipient_id) == recipient_id,
            col(ConnectionRequest.status) == ConnectionRequestStatus.PENDING,
        )
        .order_by(col(ConnectionRequest.created_at))
    )
    return list(session.exec(stmt).all())


def get_pending_request_between(
    *,
    session: Session,
    user_id: UUID,
    other_id: UUID,
) -> ConnectionRequest | None:
    """
    Find a pending request between two users in either direction.
    When duplicates exist the oldest one is returned.

    Parameters:
        session (Session): The database session.
        user_id (UUID): One user of the pair.
        other_id (UUID): The other user of the pair.
    Returns:
        ConnectionRequest | None: The pending request, if any.
    """
    stmt = (
        select(ConnectionRequest)
        .where(
            or_(
                and_(
                    col(ConnectionRequest.sender_id) == user_id,
                    col(ConnectionRequest.recipient_id) == other_id,
                ),
                and_(
                    col(ConnectionRequest.sender_id) == other_id,
                    col(ConnectionRequest.recipient_id) == user_id,
                ),
            ),
            col(ConnectionRequest.status) == ConnectionRequestStatus.PENDING,
        )
        .order_by(col(ConnectionRequest.created_at))
        .limit(1)
    )
    return session.exec(stmt).first()
