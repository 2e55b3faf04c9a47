"""Favorites API routes."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import get_current_profile, get_db
from staynest.models.favorite import Favorite
from staynest.models.profile import Profile
from staynest.models.property import Property
from staynest.schemas.property import PropertyResponse
from staynest.schemas.review import FavoriteToggleResponse

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.post(
    "/{property_id}/toggle",
    response_model=FavoriteToggleResponse,
    summary="Add or remove a property from the caller's favorites",
)
async def toggle_favorite(
    property_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> FavoriteToggleResponse:
    if await db.get(Property, property_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )

    result = await db.execute(
        delete(Favorite).where(Favorite.profile_id == profile.id, Favorite.property_id == property_id)
    )
    if result.rowcount:
        return FavoriteToggleResponse(property_id=property_id, favorite=False)

    db.add(Favorite(profile_id=profile.id, property_id=property_id))
    await db.flush()
    return FavoriteToggleResponse(property_id=property_id, favorite=True)


@router.get("", response_model=list[PropertyResponse], summary="List the caller's favorite properties")
async def list_favorites(
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> list[PropertyResponse]:
    result = await db.execute(
        select(Property)
        .join(Favorite, Favorite.property_id == Property.id)
        .where(Favorite.profile_id == profile.id)
        .order_by(Favorite.created_at.desc())
    )
    return [PropertyResponse.model_validate(p) for p in result.scalars().all()]
