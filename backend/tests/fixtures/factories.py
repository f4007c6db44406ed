from uuid import uuid4

import pytest
from factory import (
    Faker,  # type: ignore
    LazyFunction,  # type: ignore
    SelfAttribute,  # type: ignore
    Sequence,  # type: ignore
    SubFactory,  # type: ignore
)
from factory.alchemy import SQLAlchemyModelFactory
from sqlmodel import Session

from linkup.core.enums import ConnectionRequestStatus
from linkup.models.connection_request import ConnectionRequest
from linkup.models.user import User

__all__ = [
    "user_factory",
    "connection_request_factory",
]


class SQLModelFactory(SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        sqlalchemy_session_persistence = "flush"


# --------------------------------------
# FACTORIES
# --------------------------------------


class UserFactory(SQLModelFactory):
    class Meta:
        model = User

    id = LazyFunction(uuid4)
    email = Sequence(lambda n: f"user{n}@example.com")
    username = Sequence(lambda n: f"user{n}")
    name = Faker("name")
    headline = Faker("job")
    profile_picture = Faker("image_url")
    location = Faker("city")
    about = ""
    is_active = True


@pytest.fixture
def user_factory(db_transaction: Session):
    UserFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return UserFactory


class ConnectionRequestFactory(SQLModelFactory):
    class Meta:
        model = ConnectionRequest

    class Params:
        sender = SubFactory(UserFactory)
        recipient = SubFactory(UserFactory)

    id = LazyFunction(uuid4)
    sender_id = SelfAttribute("sender.id")
    recipient_id = SelfAttribute("recipient.id")
    status = ConnectionRequestStatus.PENDING


@pytest.fixture
def connection_request_factory(db_transaction: Session):
    UserFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    ConnectionRequestFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return ConnectionRequestFactory
