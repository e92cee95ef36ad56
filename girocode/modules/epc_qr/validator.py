"""Encoded-size validation for GiroCode payloads.

EPC069-12 version 002 caps the payload at 331 bytes *after* encoding with
the announced character set, so the check runs on bytes, not characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from girocode.core.logging import get_logger
from girocode.modules.epc_qr.charsets import CharacterSet, encoding_for
from girocode.modules.epc_qr.errors import (
    PayloadEmptyError,
    PayloadTooLargeError,
    UnsupportedCharacterError,
)

logger = get_logger(__name__)

MAX_PAYLOAD_BYTES = 331


class PayloadViolation(str, Enum):
    """Size constraint a rejected payload violated."""

    EMPTY = "empty"
    TOO_LARGE = "too_large"


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    byte_length: int
    violation: PayloadViolation | None = None


def encode_payload(payload: str, charset: CharacterSet | int) -> bytes:
    """Encode *payload* with the codec of *charset*.

    Character sets without a table entry encode to ``b""`` so that the
    size check rejects them as empty.

    Raises:
        UnsupportedCharacterError: If a character has no representation in
            the target character set.
    """
    encoding = encoding_for(charset)
    if encoding is None:
        return b""
    try:
        return payload.encode(encoding)
    except UnicodeEncodeError as e:
        raise UnsupportedCharacterError(charset, e.object[e.start]) from e


def validate_payload(payload: str, charset: CharacterSet | int) -> ValidationOutcome:
    """Check that the encoded payload is between 1 and 331 bytes long."""
    byte_length = len(encode_payload(payload, charset))

    if byte_length == 0:
        outcome = ValidationOutcome(False, 0, PayloadViolation.EMPTY)
    elif byte_length > MAX_PAYLOAD_BYTES:
        outcome = ValidationOutcome(False, byte_length, PayloadViolation.TOO_LARGE)
    else:
        return ValidationOutcome(True, byte_length)

    logger.info(
        "payload_rejected",
        charset=int(charset),
        byte_length=byte_length,
        violation=outcome.violation.value if outcome.violation else None,
    )
    return outcome


def ensure_valid(outcome: ValidationOutcome) -> None:
    """Raise the matching size error for a failed *outcome*."""
    if outcome.valid:
        return
    if outcome.violation is PayloadViolation.EMPTY:
        raise PayloadEmptyError()
    raise PayloadTooLargeError(outcome.byte_length, MAX_PAYLOAD_BYTES)
