"""Syntactic checks applied before any delivery attempt."""

from __future__ import annotations

import base64
import re

from mail_relay.core.exceptions import ValidationError
from mail_relay.schemas import SendPdfEmailRequest

MISSING_FIELDS = "Missing required fields"
INVALID_EMAIL = "Invalid email address"
INVALID_ATTACHMENT = "Invalid PDF attachment"

_URL_SAFE = str.maketrans("-_", "+/")
_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")


def validate_send_request(payload: SendPdfEmailRequest) -> SendPdfEmailRequest:
    """Return ``payload`` unchanged or raise :class:`ValidationError`.

    Only presence and a single ``@`` check are enforced; no DNS lookup or
    RFC 5322 parsing takes place.
    """

    if not payload.recipient_email or not payload.pdf_base64 or not payload.pdf_filename:
        raise ValidationError(MISSING_FIELDS)

    if "@" not in payload.recipient_email:
        raise ValidationError(INVALID_EMAIL)

    return payload


def decode_pdf(encoded: str) -> bytes:
    """Decode a base64 PDF payload, tolerating the usual transport damage.

    Both the standard and URL-safe alphabets are accepted. Decoding stops at
    the first ``=``, other characters outside the alphabet are dropped, and
    missing padding is restored. Only a payload with no decodable bytes at
    all is rejected.
    """

    cleaned = encoded.translate(_URL_SAFE).split("=", 1)[0]
    cleaned = _NON_ALPHABET.sub("", cleaned)
    # A single dangling sextet cannot form a byte.
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)

    data = base64.b64decode(cleaned, validate=True)
    if not data:
        raise ValidationError(INVALID_ATTACHMENT)
    return data


__all__ = [
    "validate_send_request",
    "decode_pdf",
    "MISSING_FIELDS",
    "INVALID_EMAIL",
    "INVALID_ATTACHMENT",
]
