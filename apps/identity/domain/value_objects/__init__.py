"""Domain value objects."""

from apps.identity.domain.value_objects.origin import (
    LocalOrigin,
    Origin,
    SocialOrigin,
    parse_origin,
)
from apps.identity.domain.value_objects.page_request import MAX_PAGE_SIZE, PageRequest

__all__ = [
    "LocalOrigin",
    "SocialOrigin",
    "Origin",
    "parse_origin",
    "PageRequest",
    "MAX_PAGE_SIZE",
]
