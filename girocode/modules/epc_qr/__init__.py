"""EPC QR (GiroCode) module for SEPA credit transfer payment codes."""

from girocode.modules.epc_qr.charsets import CHARSET_ENCODINGS, CharacterSet
from girocode.modules.epc_qr.errors import (
    GenerationFailedError,
    GiroCodeError,
    InvalidArgumentError,
    PayloadEmptyError,
    PayloadSizeError,
    PayloadTooLargeError,
    UnsupportedCharacterError,
)
from girocode.modules.epc_qr.payload import build_payload, format_amount
from girocode.modules.epc_qr.schemas import CaptionOptions, PaymentRequest
from girocode.modules.epc_qr.service import GiroCodeGenerator, GiroCodeService, generate_girocode
from girocode.modules.epc_qr.validator import (
    MAX_PAYLOAD_BYTES,
    PayloadViolation,
    ValidationOutcome,
    encode_payload,
    validate_payload,
)

__all__ = [
    "CHARSET_ENCODINGS",
    "MAX_PAYLOAD_BYTES",
    "CaptionOptions",
    "CharacterSet",
    "GenerationFailedError",
    "GiroCodeError",
    "GiroCodeGenerator",
    "GiroCodeService",
    "InvalidArgumentError",
    "PayloadEmptyError",
    "PayloadSizeError",
    "PayloadTooLargeError",
    "PayloadViolation",
    "PaymentRequest",
    "UnsupportedCharacterError",
    "ValidationOutcome",
    "build_payload",
    "encode_payload",
    "format_amount",
    "generate_girocode",
    "validate_payload",
]
