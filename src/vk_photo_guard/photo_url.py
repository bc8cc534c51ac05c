"""Decide whether an externally supplied image URL may be rendered as a profile photo."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlsplit

from .config import settings
from .photo_domains import load_photo_domains, matches_photo_domain

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Loaded once at import so the per-call path does no I/O
PHOTO_DOMAINS = load_photo_domains()


def _photo_host(url: str) -> str | None:
    """Return the lowercase host of an absolute http(s) URL, or None if there isn't one."""
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        return None

    if parts.scheme not in ALLOWED_SCHEMES or not host:
        return None
    # Browsers end the authority at a backslash, so "a.com\@vk.com" loads a.com
    if "\\" in parts.netloc:
        return None
    return host


def is_allowed_photo_url(candidate: object, domains: Iterable[str] | None = None) -> bool:
    """Check if ``candidate`` is an http(s) URL served from a trusted photo host.

    Never raises: anything that is not a non-empty string, does not parse as an
    absolute URL, or uses another scheme is simply not allowed. Ports and
    credentials in the URL do not affect the result. A single domain may be
    passed as a plain string.
    """
    if not isinstance(candidate, str) or not candidate:
        return False

    host = _photo_host(candidate)
    if host is None:
        return False

    if domains is None:
        domains = PHOTO_DOMAINS
    elif isinstance(domains, str):
        domains = (domains,)
    return matches_photo_domain(host, domains)


def resolve_avatar_url(candidate: object, placeholder: str | None = None) -> str:
    """Return the candidate photo URL if trusted, otherwise the placeholder image."""
    if isinstance(candidate, str) and is_allowed_photo_url(candidate):
        return candidate
    return placeholder if placeholder is not None else settings.avatar_placeholder
