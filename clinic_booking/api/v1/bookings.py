from fastapi import APIRouter, Depends, HTTPException
import httpx

from clinic_booking.api.v1.presenters import order_schema, summary_schema
from clinic_booking.api.v1.schemas import (
    BookingDraftSchema,
    OrderSchema,
    PricedSummarySchema,
    SubmitBookingRequestSchema,
)
from clinic_booking.application.exceptions import (
    OrderNotFoundError,
    SelectionIncompleteError,
    ServiceNotFoundError,
)
from clinic_booking.application.use_cases.booking import BookingUseCase
from clinic_booking.wiring.dependencies import get_booking_use_case

router = APIRouter()


def _incomplete(e: SelectionIncompleteError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "reason": e.result.reason.value if e.result.reason else None,
            "title": e.result.title,
            "description": e.result.description,
        },
    )


@router.post("/bookings/quote", response_model=PricedSummarySchema)
def quote(req: BookingDraftSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        summary = uc.quote(req.to_entity())
    except ServiceNotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    except SelectionIncompleteError as e:
        raise _incomplete(e)
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return summary_schema(summary)


@router.post("/bookings", response_model=OrderSchema, status_code=201)
def submit(req: SubmitBookingRequestSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.submit(req.to_entity(), address=req.address, notes=req.notes)
    except ServiceNotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    except SelectionIncompleteError as e:
        raise _incomplete(e)
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return order_schema(record)


@router.put("/bookings/{order_id}", response_model=OrderSchema)
def reschedule(
    order_id: str,
    req: BookingDraftSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    try:
        record = uc.reschedule(order_id, req.to_entity())
    except (ServiceNotFoundError, OrderNotFoundError) as e:
        raise HTTPException(status_code=404, detail=f"Not found: {e}")
    except SelectionIncompleteError as e:
        raise _incomplete(e)
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return order_schema(record)


@router.get("/bookings/{order_id}", response_model=OrderSchema)
def get_order(order_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.get_order(order_id)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return order_schema(record)
