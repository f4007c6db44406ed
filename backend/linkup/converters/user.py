from sqlmodel import Session

from linkup.crud import user as user_crud
from linkup.models.user import User
from linkup.schemas.user import UserProfilePublic


def to_profile_public(user: User, *, session: Session) -> UserProfilePublic:
    """
    Converts a User object to its public profile projection, including the
    IDs in the user's connection set.

    Parameters:
        user (User): The User object to convert.
        session (Session): The SQLAlchemy session for database operations.
    Returns:
        UserProfilePublic: The public profile of the user.
    Raises:
        ValidationError: If the user does not match the expected model.
    """
    User.model_validate(user)
    connections = user_crud.get_connection_ids(session=session, user_id=user.id)
    return UserProfilePublic(
        id=user.id,
        name=user.name,
        username=user.username,
        profile_picture=user.profile_picture,
        headline=user.headline,
        connections=connections,
    )
