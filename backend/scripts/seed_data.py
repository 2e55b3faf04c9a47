"""Seed the database with sample profiles, listings and bookings.

Creates the tables if needed, then inserts an admin, a host with three
listings and a renter holding one paid stay and one open hold.

Run from the ``backend`` directory:
    python -m scripts.seed_data
"""

import asyncio
import logging
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select

from staynest.booking.pricing import compute_totals
from staynest.database import Base, async_session_factory, engine
from staynest.models.booking import Booking, PaymentStatus
from staynest.models.profile import Profile
from staynest.models.property import Property

logger = logging.getLogger("seed_data")

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

PROFILES = [
    {
        "external_id": "user_demo_admin",
        "first_name": "Alex",
        "last_name": "Admin",
        "username": "admin",
        "email": "admin@staynest.test",
        "is_admin": True,
    },
    {
        "external_id": "user_demo_host",
        "first_name": "Hana",
        "last_name": "Host",
        "username": "hana",
        "email": "hana@staynest.test",
    },
    {
        "external_id": "user_demo_renter",
        "first_name": "Rui",
        "last_name": "Renter",
        "username": "rui",
        "email": "rui@staynest.test",
    },
]

PROPERTIES = [
    {
        "name": "Fjord Cabin",
        "tagline": "Timber cabin with a sauna on the water",
        "category": "cabin",
        "country": "NO",
        "description": "Two bedrooms, wood stove and a private jetty on the Hardangerfjord.",
        "price": Decimal("140.00"),
        "guests": 4,
        "bedrooms": 2,
        "beds": 3,
        "baths": 1,
        "amenities": ["sauna", "wifi", "parking"],
    },
    {
        "name": "Alfama Studio",
        "tagline": "Tiled studio in the old town",
        "category": "apartment",
        "country": "PT",
        "description": "Top-floor studio with a river view, five minutes from the tram.",
        "price": Decimal("85.00"),
        "guests": 2,
        "bedrooms": 1,
        "beds": 1,
        "baths": 1,
        "amenities": ["wifi", "kitchen", "ac"],
    },
    {
        "name": "Desert Dome",
        "tagline": "Stargazing dome under dark skies",
        "category": "dome",
        "country": "US",
        "description": "Geodesic dome with a skylight, outdoor shower and fire pit.",
        "price": Decimal("210.00"),
        "guests": 2,
        "bedrooms": 1,
        "beds": 1,
        "baths": 1,
        "amenities": ["fire pit", "parking"],
    },
]


async def seed() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as db:
        external_ids = [p["external_id"] for p in PROFILES]
        existing = await db.execute(select(Profile).where(Profile.external_id.in_(external_ids)))
        for profile in existing.scalars().all():
            await db.execute(delete(Booking).where(Booking.profile_id == profile.id))
            await db.execute(delete(Property).where(Property.profile_id == profile.id))
            await db.delete(profile)
        await db.flush()

        profiles = {p["username"]: Profile(**p) for p in PROFILES}
        db.add_all(profiles.values())
        await db.flush()

        host = profiles["hana"]
        listings = [Property(profile_id=host.id, **p) for p in PROPERTIES]
        db.add_all(listings)
        await db.flush()

        renter = profiles["rui"]
        today = date.today()
        stays = [
            (listings[0], today - timedelta(days=20), today - timedelta(days=16), PaymentStatus.PAID),
            (listings[1], today + timedelta(days=14), today + timedelta(days=17), PaymentStatus.PENDING),
        ]
        for prop, check_in, check_out, payment_status in stays:
            totals = compute_totals(check_in, check_out, prop.price)
            db.add(
                Booking(
                    property_id=prop.id,
                    profile_id=renter.id,
                    check_in=check_in,
                    check_out=check_out,
                    total_nights=totals.total_nights,
                    order_total=totals.order_total,
                    payment_status=payment_status.value,
                )
            )

        await db.commit()
        logger.info("Seeded %d profiles, %d properties, %d bookings", len(profiles), len(listings), len(stays))

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(seed())
