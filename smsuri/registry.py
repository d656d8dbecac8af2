"""Lookup of scheme handlers by name."""

from __future__ import annotations

from .config import get_allowed_schemes
from .logging import SmsUriError, get_logger
from .scheme import URIScheme
from .sms import SmsScheme
from .uri import URI

logger = get_logger(__name__)

SCHEMES: dict[str, URIScheme] = {scheme.name: scheme for scheme in (SmsScheme(),)}


class UnsupportedSchemeError(SmsUriError):
    """Raised when a URI's scheme has no allowed handler."""


def get_scheme(name: str | None) -> URIScheme | None:
    """Return the handler for a scheme name, or None.

    Lookup is case-insensitive. Schemes missing from the allowed_schemes
    config setting are treated as unknown.
    """
    if not name:
        return None
    name = name.lower()
    if name not in get_allowed_schemes():
        logger.debug("Scheme not allowed", scheme=name)
        return None
    return SCHEMES.get(name)


def validate_uri(uri: URI) -> bool:
    """Validate and normalize a URI in place with its scheme's handler.

    Returns the handler's verdict.

    Raises:
        UnsupportedSchemeError: If no allowed handler exists for uri.scheme
    """
    scheme = get_scheme(uri.scheme)
    if scheme is None:
        raise UnsupportedSchemeError(
            f"Unsupported URI scheme: {uri.scheme or '(none)'}"
        )
    return scheme.validate(uri)
