"""Star rating DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class StarRatingDTO:
    """별점 조회 결과."""

    id: UUID
    user_id: UUID
    item_id: str
    score: float
    created_at: datetime
