"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.identity.infrastructure.persistence_postgres.mappings.star_ratings import (
    start_star_ratings_mapper,
    star_ratings_table,
)
from apps.identity.infrastructure.persistence_postgres.mappings.users import (
    USERS_EXTERNAL_ID_CONSTRAINT,
    start_users_mapper,
    users_table,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_users_mapper()
    start_star_ratings_mapper()


__all__ = [
    "users_table",
    "star_ratings_table",
    "USERS_EXTERNAL_ID_CONSTRAINT",
    "start_users_mapper",
    "start_star_ratings_mapper",
    "start_all_mappers",
]
