from enum import Enum, unique


@unique
class ConnectionRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@unique
class ConnectionStatus(str, Enum):
    CONNECTED = "connected"
    PENDING = "pending"
    RECEIVED = "received"
    NOT_CONNECTED = "not_connected"


@unique
class NotificationType(str, Enum):
    CONNECTION_ACCEPTED = "connectionAccepted"
