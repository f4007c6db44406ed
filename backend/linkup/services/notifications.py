"""
Side effects of an accepted connection request.

These run as a detached background task after the accept response has been
produced. Every failure is logged and swallowed; nothing here can change the
outcome of the accept itself.
"""

from collections.abc import Callable
from logging import getLogger
from uuid import UUID

from sqlmodel import Session

from linkup.converters import notification as notification_converters
from linkup.core.config import settings
from linkup.core.enums import NotificationType
from linkup.crud import notification as notification_crud
from linkup.crud import user as user_crud
from linkup.exceptions.base import AppError
from linkup.models.user import User
from linkup.schemas.notification import NotificationPublic
from linkup.utils import (
    EmailDeliveryError,
    build_profile_url,
    generate_connection_accepted_email,
    send_email,
)

logger = getLogger(__name__)


def _create_accepted_notification(
    *,
    session: Session,
    sender_id: UUID,
    recipient_id: UUID,
) -> bool:
    try:
        notification_crud.create_notification(
            session=session,
            recipient_id=sender_id,
            type=NotificationType.CONNECTION_ACCEPTED,
            related_user_id=recipient_id,
        )
        session.commit()
        return True
    except Exception:
        session.rollback()
        logger.exception(
            "Failed creating connectionAccepted notification for %s", sender_id
        )
        return False


def _send_accepted_email(*, sender: User, recipient: User) -> bool:
    if not settings.emails_enabled:
        logger.info(
            "Email notifications are disabled; skipping delivery to %s", sender.email
        )
        return False

    email_data = generate_connection_accepted_email(
        sender_name=sender.name,
        recipient_name=recipient.name,
        profile_url=build_profile_url(recipient.username),
    )
    try:
        send_email(
            email_to=sender.email,
            subject=email_data.subject,
            html_content=email_data.html_content,
        )
        return True
    except (AssertionError, EmailDeliveryError, Exception):
        logger.exception("Failed sending connection accepted email to %s", sender.email)
        return False


def notify_connection_accepted(
    *,
    session_factory: Callable[[], Session],
    sender_id: UUID,
    recipient_id: UUID,
) -> None:
    """
    Tell the sender of a request that recipient_id accepted it: one in-app
    notification and one email. Runs in its own session and never raises.
    """
    try:
        with session_factory() as session:
            _create_accepted_notification(
                session=session,
                sender_id=sender_id,
                recipient_id=recipient_id,
            )
            sender = user_crud.get_user_by_id(session=session, user_id=sender_id)
            recipient = user_crud.get_user_by_id(session=session, user_id=recipient_id)
            if sender is None or recipient is None:
                logger.warning(
                    "Skipping connection accepted email; user %s or %s is gone",
                    sender_id,
                    recipient_id,
                )
                return
            _send_accepted_email(sender=sender, recipient=recipient)
    except Exception:
        logger.exception(
            "Connection accepted side effects failed for %s -> %s",
            sender_id,
            recipient_id,
        )


def get_notifications(*, session: Session, user_id: UUID) -> list[NotificationPublic]:
    try:
        notifications = notification_crud.get_notifications_for_user(
            session=session, user_id=user_id
        )
        return [notification_converters.to_public(n) for n in notifications]
    except Exception as e:
        raise AppError from e
