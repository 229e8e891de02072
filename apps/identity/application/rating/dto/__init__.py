"""Rating DTOs."""

from apps.identity.application.rating.dto.star_rating import StarRatingDTO

__all__ = ["StarRatingDTO"]
