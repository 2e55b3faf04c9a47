"""Property API routes: public reads, owner-scoped writes."""

import uuid
from decimal import ROUND_HALF_UP, Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import get_current_profile, get_db
from staynest.booking.dates import iter_nights
from staynest.booking.stores import SqlBookingStore
from staynest.models.profile import Profile
from staynest.models.property import Property
from staynest.models.review import Review
from staynest.schemas.common import MessageResponse
from staynest.schemas.property import (
    AvailabilityResponse,
    BlockedRange,
    PropertyCreate,
    PropertyListResponse,
    PropertyResponse,
    RatingResponse,
)

router = APIRouter(prefix="/api/v1/properties", tags=["properties"])


async def _get_property_or_404(db: AsyncSession, property_id: uuid.UUID) -> Property:
    prop = await db.get(Property, property_id)
    if prop is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )
    return prop


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="List a new property",
)
async def create_property(
    body: PropertyCreate,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> PropertyResponse:
    """Create a property owned by the caller's profile."""
    prop = Property(profile_id=profile.id, **body.model_dump())
    db.add(prop)
    await db.flush()
    await db.refresh(prop)
    return PropertyResponse.model_validate(prop)


@router.get("", response_model=PropertyListResponse, summary="Browse properties")
async def list_properties(
    search: str | None = Query(None, description="Match on name or tagline"),
    category: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> PropertyListResponse:
    """Return a page of properties, newest first."""
    filters = []
    if search:
        filters.append(Property.name.ilike(f"%{search}%") | Property.tagline.ilike(f"%{search}%"))
    if category is not None:
        filters.append(Property.category == category)

    total_result = await db.execute(select(func.count()).select_from(Property).where(*filters))
    total = total_result.scalar_one()

    result = await db.execute(
        select(Property).where(*filters).order_by(Property.created_at.desc()).offset(skip).limit(limit)
    )
    return PropertyListResponse(
        items=[PropertyResponse.model_validate(p) for p in result.scalars().all()],
        total=total,
    )


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get a property by ID")
async def get_property(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> PropertyResponse:
    prop = await _get_property_or_404(db, property_id)
    return PropertyResponse.model_validate(prop)


@router.get(
    "/{property_id}/availability",
    response_model=AvailabilityResponse,
    summary="Dates blocked by confirmed bookings",
)
async def get_availability(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> AvailabilityResponse:
    """Return the paid stays that block the property's calendar. Holds are not listed."""
    await _get_property_or_404(db, property_id)
    ranges = await SqlBookingStore(db).list_confirmed_ranges(property_id)
    return AvailabilityResponse(
        property_id=property_id,
        blocked=[BlockedRange(check_in=r.check_in, check_out=r.check_out) for r in ranges],
        blocked_dates=[night for r in ranges for night in iter_nights(r.check_in, r.check_out)],
    )


@router.get("/{property_id}/rating", response_model=RatingResponse, summary="Average review rating")
async def get_rating(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> RatingResponse:
    """Return the mean rating to one decimal place and the number of reviews."""
    result = await db.execute(
        select(func.avg(Review.rating), func.count(Review.id)).where(Review.property_id == property_id)
    )
    avg, count = result.one()
    rating = Decimal(str(avg or 0)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return RatingResponse(rating=rating, count=count)


@router.delete("/{property_id}", response_model=MessageResponse, summary="Delete a property")
async def delete_property(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> MessageResponse:
    """Delete one of the caller's properties and cascade its bookings."""
    prop = await _get_property_or_404(db, property_id)
    if prop.profile_id != profile.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )

    await db.delete(prop)
    await db.flush()
    return MessageResponse(message="Rental deleted successfully!")
