"""
Notification Handler

Notification endpoints. Mounted under /api/notifications.

/mark-all is declared before /{notification_id}.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from chirp.api.dependencies import CurrentUser
from chirp.api.dependencies.services import get_notification_service
from chirp.shared.schemas.common import MessageResponse
from chirp.shared.schemas.notification import MarkAllReadResponse, NotificationResponse
from chirp.shared.services.notification_service import NotificationService


router = APIRouter()


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: CurrentUser,
    unread_only: bool = Query(False, description="Only unread notifications"),
    notification_service: NotificationService = Depends(get_notification_service),
):
    notifications = await notification_service.list_notifications(current_user, unread_only)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.patch("/mark-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    updated = await notification_service.mark_all_read(current_user)
    return MarkAllReadResponse(updated=updated)


@router.patch("/{notification_id}", response_model=NotificationResponse)
async def mark_read(
    notification_id: UUID,
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Raises:
        403: Notification belongs to another user
        404: Unknown notification
    """
    notification = await notification_service.mark_read(current_user, notification_id)
    return NotificationResponse.model_validate(notification)


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    current_user: CurrentUser,
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.delete_notification(current_user, notification_id)
    return MessageResponse(message="Notification deleted")
