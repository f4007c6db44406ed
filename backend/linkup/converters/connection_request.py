from sqlmodel import Session

from linkup.converters import user as user_converters
from linkup.crud import user as user_crud
from linkup.exceptions.user_exceptions import UserNotFound
from linkup.models.connection_request import ConnectionRequest
from linkup.schemas.connection_request import ConnectionRequestPublic


def to_public(
    request: ConnectionRequest,
    *,
    session: Session,
) -> ConnectionRequestPublic:
    sender = user_crud.get_user_by_id(session=session, user_id=request.sender_id)
    if sender is None:
        raise UserNotFound(request.sender_id)
    return ConnectionRequestPublic(
        id=request.id,
        sender=user_converters.to_profile_public(sender, session=session),
        recipient_id=request.recipient_id,
        status=request.status,
        created_at=request.created_at,
    )
