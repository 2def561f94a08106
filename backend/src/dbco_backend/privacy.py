"""PII scrubbing for anything that leaves the process as text."""

from __future__ import annotations

import re

REDACTED = "[REDACTED]"

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", flags=re.IGNORECASE)
# Dutch numbers: 0612345678, 06-12345678, 020-1234567, +31 6 12345678, 0031612345678
_PHONE_PATTERN = re.compile(r"(?:\+31|0031|\b0)[\s-]?(?:\d[\s-]?){9}\b")
# Citizen service numbers (BSN) are nine digits.
_BSN_PATTERN = re.compile(r"\b\d{9}\b")
_PATTERNS = [_EMAIL_PATTERN, _PHONE_PATTERN, _BSN_PATTERN]


def scrub_text(value: str) -> str:
    """Mask e-mail addresses, phone numbers and BSNs in ``value``."""

    scrubbed = value
    for pattern in _PATTERNS:
        scrubbed = pattern.sub(REDACTED, scrubbed)
    return scrubbed


__all__ = ["REDACTED", "scrub_text"]
