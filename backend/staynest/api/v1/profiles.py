"""Profile API routes: every authenticated identity owns at most one profile."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import get_current_profile, get_db, get_identity
from staynest.models.profile import Profile
from staynest.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


async def _ensure_username_free(db: AsyncSession, username: str) -> None:
    result = await db.execute(select(Profile.id).where(Profile.username == username))
    if result.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the caller's profile",
)
async def create_profile(
    body: ProfileCreate,
    db: AsyncSession = Depends(get_db),
    external_id: str = Depends(get_identity),
) -> Profile:
    """Link a new marketplace profile to the authenticated identity."""
    existing = await db.execute(select(Profile.id).where(Profile.external_id == external_id))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Profile already exists",
        )
    await _ensure_username_free(db, body.username)

    profile = Profile(external_id=external_id, **body.model_dump())
    db.add(profile)
    await db.flush()
    await db.refresh(profile)
    return profile


@router.get("/me", response_model=ProfileResponse, summary="Get the caller's profile")
async def get_my_profile(profile: Profile = Depends(get_current_profile)) -> Profile:
    return profile


@router.put("/me", response_model=ProfileResponse, summary="Update the caller's profile")
async def update_my_profile(
    body: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> Profile:
    """Partially update the caller's profile. Only explicitly set fields are changed."""
    update_data = body.model_dump(exclude_unset=True)
    if "username" in update_data and update_data["username"] != profile.username:
        await _ensure_username_free(db, update_data["username"])

    for field, value in update_data.items():
        setattr(profile, field, value)

    db.add(profile)
    await db.flush()
    await db.refresh(profile)
    return profile
