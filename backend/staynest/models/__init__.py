"""SQLAlchemy models for StayNest.

All models are imported here so that ``Base.metadata`` sees every table.
If you add a new model, import it in this file.
"""

from staynest.models.booking import Booking, PaymentStatus
from staynest.models.favorite import Favorite
from staynest.models.profile import Profile
from staynest.models.property import Property
from staynest.models.review import Review

__all__ = [
    "Booking",
    "Favorite",
    "PaymentStatus",
    "Profile",
    "Property",
    "Review",
]
