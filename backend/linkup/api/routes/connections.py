import uuid

from fastapi import APIRouter, BackgroundTasks, status

from linkup.api.deps import CurrentUser, SessionDep, SessionFactoryDep
from linkup.models.auth_schemas import Message
from linkup.schemas.connection_request import (
    ConnectionRequestPublic,
    ConnectionStatusPublic,
)
from linkup.schemas.user import UserProfilePublic
from linkup.services import connection_requests as connection_requests_service
from linkup.services import graph as graph_service
from linkup.services import notifications as notifications_service
from linkup.services import status as status_service

router = APIRouter(prefix="/connections", tags=["connections"])


@router.post("/request/{user_id}", status_code=status.HTTP_201_CREATED)
def send_connection_request(
    *, session: SessionDep, current_user: CurrentUser, user_id: uuid.UUID
) -> Message:
    connection_requests_service.send_connection_request(
        session=session,
        sender_id=current_user.id,
        recipient_id=user_id,
    )
    return Message(message="Connection request sent successfully.")


@router.post("/request/", include_in_schema=False)
def send_connection_request_without_recipient(
    *, session: SessionDep, current_user: CurrentUser
) -> Message:
    # Always raises RecipientRequiredError
    connection_requests_service.send_connection_request(
        session=session,
        sender_id=current_user.id,
        recipient_id=None,
    )
    return Message(message="Connection request sent successfully.")


@router.put("/accept/{request_id}")
def accept_connection_request(
    *,
    session: SessionDep,
    session_factory: SessionFactoryDep,
    current_user: CurrentUser,
    request_id: uuid.UUID,
    background_tasks: BackgroundTasks,
) -> Message:
    request = connection_requests_service.accept_connection_request(
        session=session,
        request_id=request_id,
        current_user_id=current_user.id,
    )
    background_tasks.add_task(
        notifications_service.notify_connection_accepted,
        session_factory=session_factory,
        sender_id=request.sender_id,
        recipient_id=request.recipient_id,
    )
    return Message(message="Connection request accepted successfully.")


@router.put("/reject/{request_id}")
def reject_connection_request(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    request_id: uuid.UUID,
) -> Message:
    connection_requests_service.reject_connection_request(
        session=session,
        request_id=request_id,
        current_user_id=current_user.id,
    )
    return Message(message="Connection request rejected.")


@router.get("/requests")
def get_connection_requests(
    *, session: SessionDep, current_user: CurrentUser
) -> list[ConnectionRequestPublic]:
    return connection_requests_service.get_pending_requests(
        session=session, user_id=current_user.id
    )


@router.get("/status/{user_id}", response_model_exclude_none=True)
def get_connection_status(
    *, session: SessionDep, current_user: CurrentUser, user_id: uuid.UUID
) -> ConnectionStatusPublic:
    return status_service.get_connection_status(
        session=session,
        current_user_id=current_user.id,
        target_user_id=user_id,
    )


@router.get("")
def get_connections(
    *, session: SessionDep, current_user: CurrentUser
) -> list[UserProfilePublic]:
    return graph_service.get_connections(session=session, user_id=current_user.id)


@router.delete("/{user_id}")
def remove_connection(
    *, session: SessionDep, current_user: CurrentUser, user_id: uuid.UUID
) -> Message:
    return graph_service.remove_connection(
        session=session,
        current_user_id=current_user.id,
        connection_id=user_id,
    )
