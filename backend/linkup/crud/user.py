from uuid import UUID

from sqlmodel import Session, col, select

from linkup.models.connection import Connection
from linkup.models.user import User, UserCreate


def get_user_by_id(*, session: Session, user_id: UUID) -> User | None:
    """
    Get a user by their ID.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    return session.get(User, user_id)


def get_user_by_username(*, session: Session, username: str) -> User | None:
    """
    Get a user by their username.

    Parameters:
        session (Session): The database session.
        username (str): The username of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    statement = select(User).where(User.username == username)
    return session.exec(statement).one_or_none()


def create_user(
    *,
    session: Session,
    user_create: UserCreate,
) -> User:
    """
    Create a new user in the database.

    Parameters:
        session (Session): The database session.
        user_create (UserCreate): The user creation data.
    Returns:
        User: The created user object.
    Raises:
        IntegrityError: If a user with the same email or username already exists.
    """
    db_obj = User.model_validate(user_create)
    session.add(db_obj)
    session.flush()  # Check for unique constraints
    return db_obj


def get_connection_ids(*, session: Session, user_id: UUID) -> list[UUID]:
    """
    Get the connection set of a user.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user.
    Returns:
        list[UUID]: The IDs of every user the given user is connected to.
    """
    stmt = select(Connection.connection_id).where(Connection.user_id == user_id)
    return list(session.exec(stmt).all())


def get_connections(*, session: Session, user_id: UUID) -> list[User]:
    """
    Get the users connected to the given user, ordered by name.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user.
    Returns:
        list[User]: The connected users.
    """
    stmt = (
        select(User)
        .join(Connection, col(Connection.connection_id) == col(User.id))
        .where(Connection.user_id == user_id)
        .order_by(col(User.name))
    )
    return list(session.exec(stmt).all())
