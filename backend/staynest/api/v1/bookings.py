"""Bookings API router.

Reservations go through ``ReservationManager``: a POST places a *hold*
(``payment_status = pending``) after deleting the renter's previous holds,
and a hold only blocks other renters once payment is confirmed.
"""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import (
    get_admin_profile,
    get_current_profile,
    get_db,
    get_renter_context,
    get_reservation_manager,
)
from staynest.booking.lifecycle import ReservationManager
from staynest.booking.ports import RenterContext
from staynest.models.booking import Booking
from staynest.models.profile import Profile
from staynest.schemas.booking import (
    BookingCreate,
    BookingDetailResponse,
    BookingListResponse,
    BookingResponse,
    QuoteResponse,
)
from staynest.schemas.common import MessageResponse

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


@router.get("/quote", response_model=QuoteResponse, summary="Price a stay without reserving it")
async def quote_booking(
    property_id: uuid.UUID = Query(...),
    check_in: date = Query(...),
    check_out: date = Query(...),
    manager: ReservationManager = Depends(get_reservation_manager),
) -> QuoteResponse:
    totals = await manager.quote(property_id, check_in, check_out)
    return QuoteResponse(
        total_nights=totals.total_nights,
        subtotal=totals.subtotal,
        service_fee=totals.service_fee,
        order_total=totals.order_total,
    )


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place a hold on a property",
)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
    renter: RenterContext = Depends(get_renter_context),
    manager: ReservationManager = Depends(get_reservation_manager),
) -> Booking:
    """Create a pending booking for the caller and return it with its captured totals.

    The caller's other pending bookings are deleted in the same transaction.
    """
    booking_id = await manager.reserve(renter, body.property_id, body.check_in, body.check_out)
    return await db.get(Booking, booking_id)


@router.get("", response_model=BookingListResponse, summary="List the caller's bookings")
async def list_bookings(
    payment_status: str | None = Query(None, pattern="^(pending|paid)$"),
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> dict:
    """Return the caller's bookings with a property summary, latest check-in first."""
    filters = [Booking.profile_id == profile.id]
    if payment_status is not None:
        filters.append(Booking.payment_status == payment_status)

    total_result = await db.execute(select(func.count()).select_from(Booking).where(*filters))
    result = await db.execute(select(Booking).where(*filters).order_by(Booking.check_in.desc()))
    items = [BookingDetailResponse.model_validate(b) for b in result.scalars().all()]
    return {"items": items, "total": total_result.scalar_one()}


@router.delete("/{booking_id}", response_model=MessageResponse, summary="Delete one of the caller's bookings")
async def delete_booking(
    booking_id: uuid.UUID,
    renter: RenterContext = Depends(get_renter_context),
    manager: ReservationManager = Depends(get_reservation_manager),
) -> dict:
    await manager.cancel(renter, booking_id)
    return {"message": "Booking deleted successfully!"}


@router.post(
    "/{booking_id}/confirm",
    response_model=BookingResponse,
    summary="Record payment for a hold",
)
async def confirm_booking(
    booking_id: uuid.UUID,
    _admin: Profile = Depends(get_admin_profile),
    manager: ReservationManager = Depends(get_reservation_manager),
) -> Booking:
    """Mark a hold as paid. Answers 409 if a paid booking already covers any of its nights.

    Called on behalf of the payment processor once a charge has settled.
    """
    return await manager.confirm_payment(booking_id)
