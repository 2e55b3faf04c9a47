"""Shared API dependencies: single import point for all routers.

Re-exports database session and identity dependencies so that router
modules can import everything they need from one place::

    from staynest.api.deps import get_db, get_current_profile
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.auth.dependencies import (
    get_admin_profile,
    get_current_profile,
    get_identity,
    get_renter_context,
)
from staynest.booking.lifecycle import ReservationManager
from staynest.booking.stores import SqlBookingStore, SqlIdentityResolver, SqlPropertyStore
from staynest.config import settings
from staynest.database import get_db


async def get_reservation_manager(db: AsyncSession = Depends(get_db)) -> ReservationManager:
    """Wire the reservation lifecycle to SQL stores sharing the request session."""
    return ReservationManager(
        identities=SqlIdentityResolver(db),
        properties=SqlPropertyStore(db),
        bookings=SqlBookingStore(db),
        service_fee=settings.booking_service_fee,
    )


__all__ = [
    "get_db",
    "get_renter_context",
    "get_identity",
    "get_current_profile",
    "get_admin_profile",
    "get_reservation_manager",
]
