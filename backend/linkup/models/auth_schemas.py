from sqlmodel import SQLModel

__all__ = [
    "Message",
]


# Generic message
class Message(SQLModel):
    message: str
