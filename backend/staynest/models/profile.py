"""Profile model: a marketplace member linked to an external identity."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from staynest.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Profile(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Renter and/or owner profile. ``external_id`` is the identity provider's subject."""

    __tablename__ = "profiles"

    external_id: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(512), nullable=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Profile id={self.id} username={self.username!r} admin={self.is_admin}>"
