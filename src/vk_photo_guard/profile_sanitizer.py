from __future__ import annotations

from typing import Any

import structlog

from .config import settings
from .models import ProfileUpsert
from .photo_url import is_allowed_photo_url

log = structlog.get_logger()


def sanitize_profile_row(row: dict[str, Any], field: str | None = None) -> dict[str, Any]:
    """Return a copy of a profile row without an untrusted photo URL.

    The key is dropped rather than blanked, so an upsert keeps the photo already stored.
    """
    field = field or settings.profile_photo_field
    cleaned = dict(row)
    if field in cleaned and not is_allowed_photo_url(cleaned[field]):
        del cleaned[field]
    return cleaned


def sanitize_profile_rows(
    rows: list[dict[str, Any]], field: str | None = None
) -> list[dict[str, Any]]:
    """Strip untrusted photo URLs from every row of a profiles write."""
    cleaned = [sanitize_profile_row(row, field) for row in rows]
    stripped = sum(len(before) - len(after) for before, after in zip(rows, cleaned))
    log.info(
        "sanitized_profile_rows",
        rows=len(rows),
        stripped=stripped,
    )
    return cleaned


def build_profile_upsert(
    vk_id: int,
    first_name: str | None = None,
    last_name: str | None = None,
    photo_200: str | None = None,
) -> ProfileUpsert:
    """Build a user's own profile upsert, keeping the photo only if it is trusted."""
    if photo_200 is not None and not is_allowed_photo_url(photo_200):
        log.warning("untrusted_photo_dropped", vk_id=vk_id)
        photo_200 = None
    return ProfileUpsert(
        vk_id=vk_id,
        first_name=first_name,
        last_name=last_name,
        photo_200=photo_200,
    )
