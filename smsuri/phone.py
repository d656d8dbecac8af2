"""Phone number utilities for telephone-style URI schemes."""

from __future__ import annotations


def normalize_phone(phone: str) -> str:
    """Normalize phone number to digits only (with leading + if present).

    The + is kept only when it is the very first character of the input;
    a + anywhere else is discarded like any other non-digit. Order of the
    remaining digits is preserved.
    """
    has_plus = phone.startswith("+")
    digits = "".join(c for c in phone if c in "0123456789")
    return f"+{digits}" if has_plus else digits
