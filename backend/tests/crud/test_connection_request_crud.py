from collections.abc import Callable
from uuid import uuid4

from sqlmodel import Session

from linkup.core.enums import ConnectionRequestStatus
from linkup.crud import connection_request as connection_request_crud
from linkup.models.connection_request import ConnectionRequest
from linkup.models.user import User


def test_create_connection_request_success(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
):
    sender = user_factory()
    recipient = user_factory()

    request = connection_request_crud.create_connection_request(
        session=db_transaction, sender_id=sender.id, recipient_id=recipient.id
    )

    assert request.sender_id == sender.id
    assert request.recipient_id == recipient.id
    assert request.status == ConnectionRequestStatus.PENDING
    assert request.created_at is not None
    assert request.updated_at is None


def test_create_connection_request_created_at_survives_reload(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
):
    sender = user_factory()
    recipient = user_factory()
    request = connection_request_crud.create_connection_request(
        session=db_transaction, sender_id=sender.id, recipient_id=recipient.id
    )
    created_at = request.created_at
    assert created_at.tzinfo is not None

    db_transaction.expire_all()
    reloaded = connection_request_crud.get_connection_request_by_id(
        session=db_transaction, request_id=request.id
    )

    assert reloaded is not None
    assert reloaded.created_at.replace(tzinfo=None) == created_at.replace(
        tzinfo=None
    )


def test_create_connection_request_duplicate_is_allowed(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
):
    sender = user_factory()
    recipient = user_factory()

    first = connection_request_crud.create_connection_request(
        session=db_transaction, sender_id=sender.id, recipient_id=recipient.id
    )
    second = connection_request_crud.create_connection_request(
        session=db_transaction, sender_id=sender.id, recipient_id=recipient.id
    )

    assert first.id != second.id
    pending = connection_request_crud.get_pending_requests_for_recipient(
        session=db_transaction, recipient_id=recipient.id
    )
    assert {request.id for request in pending} == {first.id, second.id}


def test_transition_pending_request_success(
    *,
    db_transaction: Session,
    connection_request_factory: Callable[..., ConnectionRequest],
):
    request = connection_request_factory()

    updated = connection_request_crud.transition_pending_request(
        session=db_transaction,
        request_id=request.id,
        recipient_id=request.recipient_id,
        status=ConnectionRequestStatus.ACCEPTED,
    )

    assert updated is not None
    assert updated.id == request.id
    assert updated.status == ConnectionRequestStatus.ACCEPTED
    assert updated.updated_at is not None


def test_transition_pending_request_only_once(
    *,
    db_transaction: Session,
    connection_request_factory: Callable[..., ConnectionRequest],
):
    request = connection_request_factory()

    connection_request_crud.transition_pending_request(
        session=db_transaction,
        request_id=request.id,
        recipient_id=request.recipient_id,
        status=ConnectionRequestStatus.ACCEPTED,
    )
    second = connection_request_crud.transition_pending_request(
        session=db_transaction,
        request_id=request.id,
        recipient_id=request.recipient_id,
        status=ConnectionRequestStatus.REJECTED,
    )

    assert second is None
    stored = connection_request_crud.get_connection_request_by_id(
        session=db_transaction, request_id=request.id
    )
    assert stored is not None
    assert stored.status == ConnectionRequestStatus.ACCEPTED


def test_transition_pending_request_wrong_recipient(
    *,
    db_transaction: Session,
    connection_request_factory: Callable[..., ConnectionRequest],
):
    request = connection_request_factory()

    updated = connection_request_crud.transition_pending_request(
        session=db_transaction,
        request_id=request.id,
        recipient_id=request.sender_id,
        status=ConnectionRequestStatus.ACCEPTED,
    )

    assert updated is None
    db_transaction.refresh(request)
    assert request.status == ConnectionRequestStatus.PENDING


def test_transition_pending_request_not_found(
    *,
    db_transaction: Session,
):
    updated = connection_request_crud.transition_pending_request(
        session=db_transaction,
        request_id=uuid4(),
        recipient_id=uuid4(),
        status=ConnectionRequestStatus.ACCEPTED,
    )

    assert updated is None


def test_get_pending_requests_for_recipient_filters(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
    connection_request_factory: Callable[..., ConnectionRequest],
):
    recipient = user_factory()
    pending = connection_request_factory(recipient=recipient)
    connection_request_factory(
        recipient=recipient, status=ConnectionRequestStatus.REJECTED
    )
    connection_request_factory(
        recipient=recipient, status=ConnectionRequestStatus.ACCEPTED
    )
    connection_request_factory()  # addressed to someone else

    requests = connection_request_crud.get_pending_requests_for_recipient(
        session=db_transaction, recipient_id=recipient.id
    )

    assert [request.id for request in requests] == [pending.id]


def test_get_pending_request_between_either_direction(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
    connection_request_factory: Callable[..., ConnectionRequest],
):
    user1 = user_factory()
    user2 = user_factory()
    request = connection_request_factory(sender=user2, recipient=user1)

    from_user1 = connection_request_crud.get_pending_request_between(
        session=db_transaction, user_id=user1.id, other_id=user2.id
    )
    from_user2 = connection_request_crud.get_pending_request_between(
        session=db_transaction, user_id=user2.id, other_id=user1.id
    )

    assert from_user1 is not None and from_user1.id == request.id
    assert from_user2 is not None and from_user2.id == request.id


def test_get_pending_request_between_ignores_processed(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
    connection_request_factory: Callable[..., ConnectionRequest],
):
    user1 = user_factory()
    user2 = user_factory()
    connection_request_factory(
        sender=user1, recipient=user2, status=ConnectionRequestStatus.REJECTED
    )

    request = connection_request_crud.get_pending_request_between(
        session=db_transaction, user_id=user1.id, other_id=user2.id
    )

    assert request is None
