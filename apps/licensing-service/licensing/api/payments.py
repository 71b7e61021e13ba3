"""
Payments API endpoints.

Static sub-paths (`/summary`, `/range`, `/status/...`, `/license/...`,
`/reference/...`) are declared before `/{payment_id}`.
"""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from licensing.api.deps import get_payment_service
from licensing.db import schemas
from licensing.services import PaymentService

router = APIRouter(prefix="/api/payments", tags=["payments"])


def _many(items) -> List[schemas.Payment]:
    return [schemas.Payment.model_validate(p) for p in items]


def _one(payment) -> schemas.Payment:
    return schemas.Payment.model_validate(payment)


@router.get("", response_model=schemas.ApiResult[List[schemas.Payment]])
def list_payments_endpoint(service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(_many(service.list_payments()), "Payments retrieved successfully")


@router.get("/summary", response_model=schemas.ApiResult[schemas.PaymentSummary])
def payment_summary_endpoint(service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(service.summary(), "Payment summary retrieved successfully")


@router.get("/range", response_model=schemas.ApiResult[List[schemas.Payment]])
def list_payments_by_range_endpoint(
    start: datetime = Query(...),
    end: datetime = Query(...),
    service: PaymentService = Depends(get_payment_service),
):
    return schemas.ApiResult.ok(_many(service.list_by_date_range(start, end)), "Payments retrieved successfully")


@router.get("/license/{license_id}", response_model=schemas.ApiResult[List[schemas.Payment]])
def list_payments_by_license_endpoint(license_id: int, service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(
        _many(service.list_by_license(license_id)),
        f"Payments for license {license_id} retrieved successfully",
    )


@router.get("/status/{status_value}", response_model=schemas.ApiResult[List[schemas.Payment]])
def list_payments_by_status_endpoint(status_value: str, service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(
        _many(service.list_by_status(status_value)),
        f"Payments with status {status_value} retrieved successfully",
    )


@router.get("/reference/{reference}", response_model=schemas.ApiResult[schemas.Payment])
def get_payment_by_reference_endpoint(reference: str, service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(_one(service.get_by_transaction_reference(reference)), "Payment retrieved successfully")


@router.get("/{payment_id}", response_model=schemas.ApiResult[schemas.Payment])
def get_payment_endpoint(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(_one(service.get_payment(payment_id)), "Payment retrieved successfully")


@router.post("", response_model=schemas.ApiResult[schemas.Payment], status_code=status.HTTP_201_CREATED)
def create_payment_endpoint(payload: schemas.PaymentCreate, service: PaymentService = Depends(get_payment_service)):
    return schemas.ApiResult.ok(_one(service.create_payment(payload)), "Payment created successfully")


@router.put("/{payment_id}/status", response_model=schemas.ApiResult[schemas.Payment])
def update_payment_status_endpoint(
    payment_id: int,
    payload: schemas.PaymentStatusUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    payment = service.update_status(payment_id, payload.status)
    return schemas.ApiResult.ok(_one(payment), f"Payment status updated to {payment.status}")


@router.put("/{payment_id}/refund", response_model=schemas.ApiResult[schemas.Payment])
def refund_payment_endpoint(
    payment_id: int,
    payload: Optional[schemas.RefundRequest] = None,
    service: PaymentService = Depends(get_payment_service),
):
    payment = service.refund(payment_id, payload.reason if payload else None)
    return schemas.ApiResult.ok(_one(payment), "Payment refunded successfully")


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment_endpoint(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    service.delete_payment(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
