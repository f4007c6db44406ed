from .user import *
from .auth_schemas import *
from .connection import Connection
from .connection_request import ConnectionRequest
from .notification import Notification

__all__ = [
    "User",
    "UserBase",
    "UserCreate",
    "Message",
    "Connection",
    "ConnectionRequest",
    "Notification",
]
