# selva/routes/notifications.py
from typing import Optional

from fastapi import APIRouter, Depends

from selva.dependencies import get_notification_service
from selva.middleware.rbac import get_optional_user, is_admin
from selva.routes.resource_routes import register_resource_routes
from selva.schemas.notification import NotificationCreate, PushSubscriptionCreate
from selva.services.resources import NotificationService

notification_router = APIRouter(tags=["Notifications"])


@notification_router.put("/{item_id}/read")
async def mark_notification_as_read(
    item_id: str,
    service: NotificationService = Depends(get_notification_service),
):
    return await service.mark_read(item_id)


@notification_router.post("/subscribe")
async def subscribe_to_push_notifications(
    data: PushSubscriptionCreate,
    user: Optional[dict] = Depends(get_optional_user),
    service: NotificationService = Depends(get_notification_service),
):
    return await service.subscribe(data, user_id=user["userId"] if user else None)


# Admin: send (create) a notification
@notification_router.post("/send", status_code=201, dependencies=[Depends(is_admin)])
async def send_notification(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    return await service.create(data)


register_resource_routes(notification_router, NotificationService, get_notification_service)
