# selva/schemas/notification.py
from typing import Any, Literal, Optional

from selva.schemas.base import CamelModel, NonEmptyStr

NotificationType = Literal["info", "success", "warning", "error"]


class NotificationCreate(CamelModel):
    type: NotificationType = "info"
    title: NonEmptyStr
    message: NonEmptyStr
    action_url: Optional[str] = None


class NotificationUpdate(CamelModel):
    type: Optional[NotificationType] = None
    title: Optional[NonEmptyStr] = None
    message: Optional[NonEmptyStr] = None
    action_url: Optional[str] = None


class PushSubscriptionCreate(CamelModel):
    subscription: dict[str, Any]
