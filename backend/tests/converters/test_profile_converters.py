from collections.abc import Callable

from sqlmodel import Session

from linkup.converters import connection_request as connection_request_converters
from linkup.converters import user as user_converters
from linkup.models.connection_request import ConnectionRequest
from linkup.models.user import User
from linkup.services import graph as graph_services


def test_to_profile_public_includes_connection_set(
    *,
    db_transaction: Session,
    user_factory: Callable[..., User],
):
    user = user_factory(headline="Astronomer", profile_picture="vera.png")
    friend1 = user_factory()
    friend2 = user_factory()
    for friend in (friend1, friend2):
        graph_services.link_users(
            session=db_transaction, user_id=user.id, other_id=friend.id
        )

    profile = user_converters.to_profile_public(user, session=db_transaction)

    assert profile.id == user.id
    assert profile.name == user.name
    assert profile.username == user.username
    assert profile.headline == "Astronomer"
    assert profile.profile_picture == "vera.png"
    assert set(profile.connections) == {friend1.id, friend2.id}
    assert "email" not in profile.model_dump()


def test_connection_request_to_public(
    *,
    db_transaction: Session,
    connection_request_factory: Callable[..., ConnectionRequest],
):
    request = connection_request_factory()

    public = connection_request_converters.to_public(request, session=db_transaction)

    assert public.id == request.id
    assert public.sender.id == request.sender_id
    assert public.recipient_id == request.recipient_id
    assert public.status == request.status
    assert public.created_at == request.created_at
