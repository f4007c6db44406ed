from fastapi import APIRouter

from linkup.api.deps import CurrentUser, SessionDep
from linkup.schemas.notification import NotificationPublic
from linkup.services import notifications as notifications_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
def get_notifications(
    *, session: SessionDep, current_user: CurrentUser
) -> list[NotificationPublic]:
    return notifications_service.get_notifications(
        session=session, user_id=current_user.id
    )
