import uuid
from collections.abc import Callable, Generator
from typing import Annotated

from fastapi import Depends, Header
from sqlmodel import Session

from linkup.core.db import engine, new_session
from linkup.crud import user as user_crud
from linkup.exceptions.user_exceptions import InactiveUserError, NotAuthenticatedError
from linkup.models.user import User


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_session_factory() -> Callable[[], Session]:
    return new_session


SessionDep = Annotated[Session, Depends(get_db)]
SessionFactoryDep = Annotated[Callable[[], Session], Depends(get_session_factory)]


# The authentication gateway in front of the API forwards the caller's id.
def get_current_user(
    session: SessionDep,
    x_user_id: Annotated[str | None, Header()] = None,
) -> User:
    if not x_user_id:
        raise NotAuthenticatedError()
    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError:
        raise NotAuthenticatedError() from None
    user = user_crud.get_user_by_id(session=session, user_id=user_id)
    if user is None:
        raise NotAuthenticatedError()
    if not user.is_active:
        raise InactiveUserError()
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
