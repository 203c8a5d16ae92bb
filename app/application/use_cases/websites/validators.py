"""Validation helpers shared by the website use cases."""

import re
from collections.abc import Iterable

from app.config import DNS_LABEL_MAX_LENGTH
from app.domain.errors import (
    InvalidNameError,
    InvalidSubdomainError,
    SubdomainErrorReason,
)

_SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")


def normalize_subdomain(candidate: str) -> str:
    """Return ``candidate`` stripped and lower-cased."""

    return candidate.strip().lower()


def validate_subdomain(
    candidate: str,
    existing_subdomains: Iterable[str],
    *,
    max_length: int = DNS_LABEL_MAX_LENGTH,
) -> str:
    """Return the normalized subdomain or raise ``InvalidSubdomainError``.

    The label follows DNS rules: lower-case letters, digits and hyphens, no
    leading or trailing hyphen, at most ``max_length`` characters. ASCII input is
    lower-cased, so ``MyBlog`` is accepted as ``myblog`` and collides with an
    existing ``myblog``.
    """

    stripped = candidate.strip()
    if not stripped:
        raise InvalidSubdomainError(SubdomainErrorReason.EMPTY, candidate)
    if len(stripped) > max_length:
        raise InvalidSubdomainError(SubdomainErrorReason.TOO_LONG, candidate)
    # Checked before lower-casing: some non-ASCII letters lower to ASCII.
    if not stripped.isascii():
        raise InvalidSubdomainError(SubdomainErrorReason.BAD_CHARACTERS, candidate)
    normalized = normalize_subdomain(stripped)
    if not _SUBDOMAIN_PATTERN.match(normalized):
        raise InvalidSubdomainError(SubdomainErrorReason.BAD_CHARACTERS, candidate)

    taken = {normalize_subdomain(existing) for existing in existing_subdomains}
    if normalized in taken:
        raise InvalidSubdomainError(SubdomainErrorReason.ALREADY_TAKEN, candidate)
    return normalized


def validate_name(name: str | None) -> str:
    """Return the stripped display name or raise ``InvalidNameError``."""

    normalized = (name or "").strip()
    if not normalized:
        raise InvalidNameError()
    return normalized


def normalize_domain(domain: str | None) -> str | None:
    """Return a custom domain stripped and lower-cased, ``None`` when blank."""

    if domain is None:
        return None
    normalized = domain.strip().strip(".").lower()
    return normalized or None


__all__ = [
    "normalize_domain",
    "normalize_subdomain",
    "validate_name",
    "validate_subdomain",
]
