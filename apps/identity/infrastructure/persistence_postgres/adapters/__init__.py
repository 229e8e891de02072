"""Infrastructure adapters implementing application ports."""

from apps.identity.infrastructure.persistence_postgres.adapters.star_rating_gateway_sqla import (
    SqlaStarRatingQueryGateway,
)
from apps.identity.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.identity.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    SqlaUsersCommandGateway,
    SqlaUsersQueryGateway,
)

__all__ = [
    "SqlaUsersQueryGateway",
    "SqlaUsersCommandGateway",
    "SqlaStarRatingQueryGateway",
    "SqlaTransactionManager",
]
