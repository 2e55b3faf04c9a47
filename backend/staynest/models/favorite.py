"""Favorite model."""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from staynest.database import Base, UUIDPrimaryKeyMixin


class Favorite(UUIDPrimaryKeyMixin, Base):
    """A property bookmarked by a profile."""

    __tablename__ = "favorites"

    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    profile_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    __table_args__ = (
        UniqueConstraint("profile_id", "property_id", name="uq_favorites_profile_property"),
    )
