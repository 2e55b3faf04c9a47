"""Reviews API routes.

A profile may review a property once, and never one it owns.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import get_current_profile, get_db
from staynest.models.profile import Profile
from staynest.models.property import Property
from staynest.models.review import Review
from staynest.schemas.common import MessageResponse
from staynest.schemas.review import ReviewCreate, ReviewResponse

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Review a property",
)
async def create_review(
    body: ReviewCreate,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> Review:
    prop = await db.get(Property, body.property_id)
    if prop is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )
    if prop.profile_id == profile.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You cannot review your own property",
        )

    existing = await db.execute(
        select(Review.id).where(Review.profile_id == profile.id, Review.property_id == body.property_id)
    )
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="You have already reviewed this property",
        )

    review = Review(profile_id=profile.id, **body.model_dump())
    db.add(review)
    await db.flush()
    await db.refresh(review)
    return review


@router.get("/property/{property_id}", response_model=list[ReviewResponse], summary="Reviews of a property")
async def list_property_reviews(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> list[Review]:
    result = await db.execute(
        select(Review).where(Review.property_id == property_id).order_by(Review.created_at.desc())
    )
    return list(result.scalars().all())


@router.get("/me", response_model=list[ReviewResponse], summary="Reviews written by the caller")
async def list_my_reviews(
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> list[Review]:
    result = await db.execute(
        select(Review).where(Review.profile_id == profile.id).order_by(Review.created_at.desc())
    )
    return list(result.scalars().all())


@router.delete("/{review_id}", response_model=MessageResponse, summary="Delete one of the caller's reviews")
async def delete_review(
    review_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> MessageResponse:
    result = await db.execute(delete(Review).where(Review.id == review_id, Review.profile_id == profile.id))
    if not result.rowcount:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Review not found",
        )
    return MessageResponse(message="Review deleted successfully!")
