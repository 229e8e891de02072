"""StarRating entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass
class StarRating:
    """사용자가 남긴 별점.

    이 서비스에서는 조회만 합니다.
    """

    id: UUID
    user_id: UUID
    item_id: str
    score: float
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
