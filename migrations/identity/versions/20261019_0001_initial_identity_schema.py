"""Initial identity schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Identity Domain Migration
Schema: identity.*

- identity.users: 로컬/소셜 계정 (external_id 전역 유일)
- identity.star_ratings: 사용자 별점 (계정 삭제 시 함께 삭제)
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create identity schema tables."""
    # 스키마 생성
    op.execute("CREATE SCHEMA IF NOT EXISTS identity")

    # ENUM 타입 생성
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE identity.auth_provider AS ENUM ('local', 'kakao', 'naver', 'google');
        EXCEPTION
            WHEN duplicate_object THEN NULL;
        END $$;
    """)

    # ============================================
    # identity.users 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS identity.users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            external_id TEXT NOT NULL,
            provider identity.auth_provider NOT NULL,
            password_hash TEXT,
            nickname TEXT NOT NULL,
            age INTEGER,
            gender TEXT,
            phone_number VARCHAR(20),
            profile_image_url TEXT,
            push_token TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_identity_users_external_id UNIQUE (external_id)
        )
    """)

    # ============================================
    # identity.star_ratings 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS identity.star_ratings (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id UUID NOT NULL REFERENCES identity.users(id) ON DELETE CASCADE,
            item_id TEXT NOT NULL,
            score DOUBLE PRECISION NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_star_ratings_user_created
        ON identity.star_ratings(user_id, created_at)
    """)


def downgrade() -> None:
    """Drop identity schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS identity.star_ratings CASCADE")
    op.execute("DROP TABLE IF EXISTS identity.users CASCADE")
    op.execute("DROP TYPE IF EXISTS identity.auth_provider CASCADE")
    op.execute("DROP SCHEMA IF EXISTS identity CASCADE")
