"""
Notifications API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from licensing.api.deps import get_notification_service
from licensing.db import schemas
from licensing.services import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def _many(items) -> List[schemas.Notification]:
    return [schemas.Notification.model_validate(n) for n in items]


@router.get("", response_model=schemas.ApiResult[List[schemas.Notification]])
def list_notifications_endpoint(service: NotificationService = Depends(get_notification_service)):
    return schemas.ApiResult.ok(_many(service.list_notifications()), "Notifications retrieved successfully")


@router.get("/status/{status_value}", response_model=schemas.ApiResult[List[schemas.Notification]])
def list_notifications_by_status_endpoint(
    status_value: str,
    service: NotificationService = Depends(get_notification_service),
):
    items = _many(service.list_by_status(status_value))
    return schemas.ApiResult.ok(items, f"Notifications with status {status_value} retrieved successfully")


@router.get("/{notification_id}", response_model=schemas.ApiResult[schemas.Notification])
def get_notification_endpoint(
    notification_id: int,
    service: NotificationService = Depends(get_notification_service),
):
    notification = service.get_notification(notification_id)
    return schemas.ApiResult.ok(
        schemas.Notification.model_validate(notification), "Notification retrieved successfully"
    )


@router.post("", response_model=schemas.ApiResult[schemas.Notification], status_code=status.HTTP_201_CREATED)
def create_notification_endpoint(
    payload: schemas.NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    notification = service.create_notification(payload.title, payload.message, payload.status)
    return schemas.ApiResult.ok(
        schemas.Notification.model_validate(notification), "Notification created successfully"
    )


@router.put("/{notification_id}", response_model=schemas.ApiResult[schemas.Notification])
def update_notification_endpoint(
    notification_id: int,
    payload: schemas.NotificationUpdate,
    service: NotificationService = Depends(get_notification_service),
):
    notification = service.update_notification(
        notification_id, payload.title, message=payload.message, status=payload.status
    )
    return schemas.ApiResult.ok(
        schemas.Notification.model_validate(notification), "Notification updated successfully"
    )


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification_endpoint(
    notification_id: int,
    service: NotificationService = Depends(get_notification_service),
):
    service.delete_notification(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
