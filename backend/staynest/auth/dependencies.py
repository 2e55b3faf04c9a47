"""FastAPI authentication dependencies.

Routes receive the caller's identity as an explicit ``RenterContext`` (or a
resolved ``Profile``) rather than reading ambient request state.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.auth.jwt import decode_token
from staynest.booking.errors import ProfileRequiredError, UnauthenticatedError
from staynest.booking.ports import MissingProfile, RenterContext
from staynest.booking.stores import SqlIdentityResolver
from staynest.database import get_db
from staynest.models.profile import Profile

# Optional bearer: returns None if no token provided
_bearer_scheme_optional = HTTPBearer(auto_error=False)


async def get_renter_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme_optional),
) -> RenterContext:
    """Build the caller's identity context from an optional Bearer token.

    Missing, invalid, expired or wrong-type tokens all yield an anonymous
    context; operations that need an identity reject it themselves.
    """
    if credentials is None:
        return RenterContext(external_id=None)

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        return RenterContext(external_id=None)

    if payload.get("type") != "access":
        return RenterContext(external_id=None)

    sub: str | None = payload.get("sub")
    return RenterContext(external_id=sub or None)


async def get_identity(renter: RenterContext = Depends(get_renter_context)) -> str:
    """Return the authenticated external id, profile or not.

    Raises:
        UnauthenticatedError: If the request carried no valid token.
    """
    if renter.external_id is None:
        raise UnauthenticatedError()
    return renter.external_id


async def get_current_profile(
    external_id: str = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """Return the caller's profile.

    Raises:
        ProfileRequiredError: Authenticated but no profile has been created yet.
    """
    lookup = await SqlIdentityResolver(db).resolve(external_id)
    if isinstance(lookup, MissingProfile):
        raise ProfileRequiredError()
    return lookup.profile


async def get_admin_profile(profile: Profile = Depends(get_current_profile)) -> Profile:
    """Return the caller's profile only if it carries the admin role.

    Raises:
        HTTPException 403: If the profile is not an admin.
    """
    if not profile.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return profile
