"""Booking model: a hold or a paid stay at a property."""

import enum
import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staynest.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class PaymentStatus(str, enum.Enum):
    """A pending booking is a hold; only paid bookings block dates."""

    PENDING = "pending"
    PAID = "paid"


class Booking(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A reservation linking a renter profile to a property for a date range.

    ``total_nights`` and ``order_total`` are captured when the booking is
    created and never re-derived from the property's current price.
    """

    __tablename__ = "bookings"

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
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    total_nights: Mapped[int] = mapped_column(Integer, nullable=False)
    order_total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_status: Mapped[str] = mapped_column(
        String(20),
        default=PaymentStatus.PENDING.value,
        nullable=False,
        index=True,
    )

    # Relationships
    property: Mapped["Property"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    profile: Mapped["Profile"] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        CheckConstraint("check_out > check_in", name="ck_bookings_check_out_after_check_in"),
        CheckConstraint("total_nights > 0", name="ck_bookings_total_nights_positive"),
        Index("ix_bookings_property_dates", "property_id", "check_in", "check_out"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, property_id={self.property_id}, "
            f"profile_id={self.profile_id}, status={self.payment_status})>"
        )
