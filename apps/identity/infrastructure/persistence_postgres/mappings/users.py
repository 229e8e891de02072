"""Users ORM Mapping.

User 도메인 엔티티와 identity.users 테이블의 매핑입니다.

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입
    - VARCHAR: 표준 규격이 명확한 경우만 사용
        - phone_number: VARCHAR(20) - E.164
"""

from sqlalchemy import Column, DateTime, Enum, Integer, String, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.infrastructure.persistence_postgres.registry import mapper_registry

USERS_EXTERNAL_ID_CONSTRAINT = "uq_identity_users_external_id"

users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("external_id", Text, nullable=False),
    Column(
        "provider",
        Enum(
            AuthProvider,
            name="auth_provider",
            schema="identity",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    ),
    Column("password_hash", Text),
    Column("nickname", Text, nullable=False),
    Column("age", Integer),
    Column("gender", Text),
    Column("phone_number", String(20)),
    Column("profile_image_url", Text),
    Column("push_token", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    # 출처와 무관하게 external_id는 전역 유일
    UniqueConstraint("external_id", name=USERS_EXTERNAL_ID_CONSTRAINT),
)


def start_users_mapper() -> None:
    """Users 매퍼 시작.

    Note:
        Imperative Mapping 사용.
        도메인 엔티티가 SQLAlchemy에 의존하지 않도록 합니다.
    """
    from apps.identity.domain.entities.user import User

    # 이미 매핑된 경우 스킵
    if hasattr(User, "__mapper__"):
        return

    mapper_registry.map_imperatively(User, users_table)
