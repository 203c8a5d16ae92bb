"""Errors raised by website lifecycle operations.

Every error is a ``ValueError`` so callers that only distinguish bad input
from bugs keep working; ``code`` identifies the kind for collaborators that
translate errors into their own messages.
"""

from enum import Enum


class SubdomainErrorReason(str, Enum):
    """Why a subdomain candidate was rejected."""

    EMPTY = "EMPTY"
    BAD_CHARACTERS = "BAD_CHARACTERS"
    TOO_LONG = "TOO_LONG"
    ALREADY_TAKEN = "ALREADY_TAKEN"


class WebsiteError(ValueError):
    """Base class for recoverable website errors."""

    code = "website_error"


class UnknownTemplateError(WebsiteError):
    """Raised when a template id is not present in the catalog."""

    code = "unknown_template"

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Template '{template_id}' does not exist")
        self.template_id = template_id


class InvalidSubdomainError(WebsiteError):
    """Raised when a subdomain fails syntax or uniqueness validation."""

    code = "invalid_subdomain"

    def __init__(self, reason: SubdomainErrorReason, subdomain: str = "") -> None:
        super().__init__(f"Invalid subdomain '{subdomain}': {reason.value}")
        self.reason = reason
        self.subdomain = subdomain


class InvalidNameError(WebsiteError):
    """Raised when a website display name is empty."""

    code = "invalid_name"

    def __init__(self) -> None:
        super().__init__("Website name must not be empty")


class WebsiteNotFoundError(WebsiteError):
    """Raised when an operation references an unknown website id."""

    code = "not_found"

    def __init__(self, website_id: int) -> None:
        super().__init__(f"Website {website_id} not found")
        self.website_id = website_id


class InvalidVisitCountError(WebsiteError):
    """Raised when a negative number of visits is recorded."""

    code = "invalid_visit_count"

    def __init__(self, visits: int) -> None:
        super().__init__(f"Visit count must be non-negative, got {visits}")
        self.visits = visits


__all__ = [
    "InvalidNameError",
    "InvalidSubdomainError",
    "InvalidVisitCountError",
    "SubdomainErrorReason",
    "UnknownTemplateError",
    "WebsiteError",
    "WebsiteNotFoundError",
]
