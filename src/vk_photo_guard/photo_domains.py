"""Trusted photo-hosting domains loaded from config.yml."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from .models import PhotoDomains
from .yaml_config import get_photo_domains


@lru_cache(maxsize=1)
def load_photo_domains() -> tuple[str, ...]:
    """Validate and return the configured allow-list, in config order."""
    return PhotoDomains(domains=get_photo_domains()).domains


def matches_photo_domain(host: str, domains: Iterable[str]) -> bool:
    """Check if a lowercase host is a trusted domain or a subdomain of one."""
    return any(host == domain or host.endswith("." + domain) for domain in domains)
