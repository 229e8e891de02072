"""Application queries (read operations)."""

from apps.identity.application.queries.get_star_ratings import GetStarRatingsQuery
from apps.identity.application.queries.get_user import GetUserQuery
from apps.identity.application.queries.validate_user_id import ValidateUserIdQuery

__all__ = [
    "GetUserQuery",
    "ValidateUserIdQuery",
    "GetStarRatingsQuery",
]
