from sqlmodel import Session, create_engine

from linkup.core.config import settings

engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    pool_pre_ping=True,
)


def new_session() -> Session:
    return Session(engine)
