"""Domain entities."""

from apps.identity.domain.entities.star_rating import StarRating
from apps.identity.domain.entities.user import User

__all__ = ["User", "StarRating"]
