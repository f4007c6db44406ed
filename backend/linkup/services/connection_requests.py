from logging import getLogger
from uuid import UUID

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from linkup.converters import connection_request as connection_request_converters
from linkup.core.enums import ConnectionRequestStatus
from linkup.crud import connection_request as connection_request_crud
from linkup.exceptions.base import AppError
from linkup.exceptions.connection_exceptions import (
    ConnectionRequestAlreadyProcessedError,
    ConnectionRequestForbiddenError,
    ConnectionRequestNotFoundError,
    RecipientRequiredError,
)
from linkup.exceptions.user_exceptions import OneOrMoreUsersNotFound
from linkup.models.connection_request import ConnectionRequest
from linkup.schemas.connection_request import ConnectionRequestPublic
from linkup.services import graph as graph_service

logger = getLogger(__name__)


def send_connection_request(
    *,
    session: Session,
    sender_id: UUID,
    recipient_id: UUID | None,
) -> ConnectionRequest:
    """
    Create a pending connection request from sender to recipient.
    Does not check for an earlier pending request, an existing connection or a
    request to oneself.
    Raises:
        RecipientRequiredError: If no recipient is given.
        OneOrMoreUsersNotFound: If one or both users do not exist.
        AppError: For any other (unexpected) errors.
    """
    if recipient_id is None:
        raise RecipientRequiredError()
    try:
        request = connection_request_crud.create_connection_request(
            session=session,
            sender_id=sender_id,
            recipient_id=recipient_id,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise OneOrMoreUsersNotFound([sender_id, recipient_id]) from e
        raise AppError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("User %s sent a connection request to %s", sender_id, recipient_id)
    return request


def accept_connection_request(
    *,
    session: Session,
    request_id: UUID,
    current_user_id: UUID,
) -> ConnectionRequest:
    """
    Accept a pending connection request addressed to current_user_id and link
    both users, all in one transaction.
    Raises:
        ConnectionRequestNotFoundError: If the request does not exist, is not
            addressed to current_user_id or is no longer pending.
        AppError: For any other (unexpected) errors.
    """
    try:
        request = connection_request_crud.transition_pending_request(
            session=session,
            request_id=request_id,
            recipient_id=current_user_id,
            status=ConnectionRequestStatus.ACCEPTED,
        )
        if request is not None:
            graph_service.link_users(
                session=session,
                user_id=request.sender_id,
                other_id=request.recipient_id,
            )
            session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    if request is None:
        raise ConnectionRequestNotFoundError(request_id)
    logger.info(
        "User %s accepted connection request %s from %s",
        current_user_id,
        request_id,
        request.sender_id,
    )
    return request


def reject_connection_request(
    *,
    session: Session,
    request_id: UUID,
    current_user_id: UUID,
) -> ConnectionRequest:
    """
    Reject a pending connection request addressed to current_user_id.
    Raises:
        ConnectionRequestNotFoundError: If the request does not exist.
        ConnectionRequestForbiddenError: If current_user_id is not the recipient.
        ConnectionRequestAlreadyProcessedError: If the request is no longer pending.
        AppError: For any other (unexpected) errors.
    """
    try:
        request = connection_request_crud.get_connection_request_by_id(
            session=session, request_id=request_id
        )
    except Exception as e:
        session.rollback()
        raise AppError from e

    if request is None:
        raise ConnectionRequestNotFoundError(request_id)
    if request.recipient_id != current_user_id:
        raise ConnectionRequestForbiddenError(request_id)
    if request.status != ConnectionRequestStatus.PENDING:
        raise ConnectionRequestAlreadyProcessedError(request_id)

    try:
        rejected = connection_request_crud.transition_pending_request(
            session=session,
            request_id=request_id,
            recipient_id=current_user_id,
            status=ConnectionRequestStatus.REJECTED,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    # Lost a race against a concurrent accept or reject
    if rejected is None:
        raise ConnectionRequestAlreadyProcessedError(request_id)
    logger.info("User %s rejected connection request %s", current_user_id, request_id)
    return rejected


def get_pending_requests(
    *,
    session: Session,
    user_id: UUID,
) -> list[ConnectionRequestPublic]:
    """
    Get the pending connection requests addressed to user_id, oldest first,
    each with the sender's public profile.
    Raises:
        UserNotFound: If the sender of a request no longer exists.
        AppError: For any (unexpected) errors.
    """
    try:
        requests = connection_request_crud.get_pending_requests_for_recipient(
            session=session, recipient_id=user_id
        )
        return [
            connection_request_converters.to_public(request, session=session)
            for request in requests
        ]
    except AppError:
        raise
    except Exception as e:
        raise AppError from e
