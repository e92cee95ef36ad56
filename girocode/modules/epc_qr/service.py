"""
GiroCode generation service.

Orchestrates the full pipeline for a SEPA credit transfer code:
build payload -> validate encoded size -> QR encode (level M) -> render PNG.
Every failure reaches the caller as a single ``GenerationFailedError``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable

from girocode.core.logging import get_logger, mask_account_number
from girocode.modules.epc_qr.charsets import CharacterSet
from girocode.modules.epc_qr.errors import GenerationFailedError, GiroCodeError
from girocode.modules.epc_qr.payload import build_payload
from girocode.modules.epc_qr.renderer import GiroCodeRenderer
from girocode.modules.epc_qr.schemas import CaptionOptions, PaymentRequest
from girocode.modules.epc_qr.validator import encode_payload, ensure_valid, validate_payload

logger = get_logger(__name__)


@runtime_checkable
class GiroCodeGenerator(Protocol):
    """Protocol for anything that turns a payment request into an image."""

    def generate_code(self, request: PaymentRequest) -> bytes:
        """Return PNG bytes for *request* or raise GenerationFailedError."""
        ...


class GiroCodeService:
    """
    Service for generating GiroCode (EPC QR) payment images.

    Holds only immutable configuration, so one instance can be shared
    across threads.
    """

    def __init__(
        self,
        caption: CaptionOptions | None = None,
        renderer: GiroCodeRenderer | None = None,
    ) -> None:
        self._caption = caption or CaptionOptions.from_settings()
        self._renderer = renderer or GiroCodeRenderer()

    @property
    def caption(self) -> CaptionOptions:
        return self._caption

    def build_payload(self, request: PaymentRequest) -> str:
        """Build the canonical payload text for *request*."""
        return build_payload(
            beneficiary=request.beneficiary,
            iban=request.iban,
            remittance=request.remittance,
            amount=request.amount,
            bic=request.bic,
            reference=request.reference,
            charset=request.charset,
        )

    def generate_code(self, request: PaymentRequest) -> bytes:
        """
        Generate a GiroCode PNG for a payment request.

        Args:
            request: Payment fields and character set

        Returns:
            PNG image bytes

        Raises:
            GenerationFailedError: Wrapping InvalidArgumentError,
                UnsupportedCharacterError, PayloadEmptyError,
                PayloadTooLargeError or a QR encoding/rendering error
        """
        try:
            payload = self.build_payload(request)
            outcome = validate_payload(payload, request.charset)
            ensure_valid(outcome)

            data = encode_payload(payload, request.charset)
            qr = self._renderer.encode_matrix(data)
            image = self._renderer.render(qr, self._caption)
        except GiroCodeError as e:
            logger.warning(
                "girocode_generation_failed",
                error_type=type(e).__name__,
                error=str(e),
                charset=int(request.charset),
                iban=mask_account_number(request.iban),
            )
            raise GenerationFailedError(e) from e
        except Exception as e:
            logger.exception("girocode_rendering_failed", charset=int(request.charset))
            raise GenerationFailedError(e) from e

        logger.info(
            "girocode_generated",
            charset=int(request.charset),
            payload_bytes=outcome.byte_length,
            qr_version=qr.version,
            image_bytes=len(image),
        )
        return image


def generate_girocode(
    beneficiary: str,
    iban: str,
    remittance: str,
    amount: Decimal | float | int | str,
    bic: str | None = None,
    reference: str | None = None,
    charset: CharacterSet = CharacterSet.UTF8,
    caption: CaptionOptions | None = None,
) -> bytes:
    """
    Generate a GiroCode PNG from individual payment fields.

    Field-level input errors (e.g. a negative amount rejected by
    PaymentRequest) are reported as GenerationFailedError as well.
    """
    try:
        request = PaymentRequest(
            beneficiary=beneficiary,
            iban=iban,
            remittance=remittance,
            amount=amount,
            bic=bic or "",
            reference=reference or "",
            charset=charset,
        )
    except ValueError as e:
        raise GenerationFailedError(e) from e

    return GiroCodeService(caption=caption).generate_code(request)
