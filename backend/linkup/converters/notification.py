from linkup.models.notification import Notification
from linkup.schemas.notification import NotificationPublic


def to_public(notification: Notification) -> NotificationPublic:
    return NotificationPublic.model_validate(notification, from_attributes=True)
