from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, field_validator

_HOSTNAME_RE = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)*")


class PhotoDomains(BaseModel):
    """Allow-list of hosts trusted to serve profile photos."""

    domains: tuple[str, ...]

    @field_validator("domains")
    @classmethod
    def _check_hostnames(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for domain in value:
            if not _HOSTNAME_RE.fullmatch(domain):
                raise ValueError(
                    f"invalid photo domain {domain!r}: expected a lowercase hostname "
                    "without scheme, path, or port"
                )
        # Keep first occurrence order
        return tuple(dict.fromkeys(value))


class ProfileUpsert(BaseModel):
    """Fields a user may write to their own profile row."""

    vk_id: int
    first_name: str | None = None
    last_name: str | None = None
    photo_200: str | None = None

    def to_row(self) -> dict[str, Any]:
        """Row for an upsert; unset fields are omitted so stored values survive."""
        return self.model_dump(exclude_none=True)


class CheckStats(BaseModel):
    """Statistics for a single CLI run."""

    total: int = 0
    allowed: int = 0
    rejected: int = 0
