from uuid import UUID

from sqlmodel import Session, col, select

from linkup.core.enums import NotificationType
from linkup.models.notification import Notification


def create_notification(
    *,
    session: Session,
    recipient_id: UUID,
    type: NotificationType,
    related_user_id: UUID,
) -> Notification:
    notification = Notification(
        recipient_id=recipient_id,
        type=type,
        related_user_id=related_user_id,
    )
    session.add(notification)
    session.flush()
    return notification


def get_notifications_for_user(
    *,
    session: Session,
    user_id: UUID,
) -> list[Notification]:
    stmt = (
        select(Notification)
        .where(col(Notification.recipient_id) == user_id)
        .order_by(col(Notification.created_at).desc())
    )
    return list(session.exec(stmt).all())
