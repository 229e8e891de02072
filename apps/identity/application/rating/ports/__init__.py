"""Rating ports."""

from apps.identity.application.rating.ports.star_rating_gateway import (
    StarRatingQueryGateway,
)

__all__ = ["StarRatingQueryGateway"]
