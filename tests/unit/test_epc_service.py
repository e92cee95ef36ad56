"""Unit tests for GiroCode generation, rendering and error wrapping."""

from __future__ import annotations

import io
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import qrcode  # type: ignore[import-untyped]
from PIL import Image

from girocode.modules.epc_qr.charsets import CharacterSet
from girocode.modules.epc_qr.errors import (
    GenerationFailedError,
    InvalidArgumentError,
    PayloadEmptyError,
    PayloadTooLargeError,
    UnsupportedCharacterError,
)
from girocode.modules.epc_qr.renderer import GiroCodeRenderer
from girocode.modules.epc_qr.schemas import CaptionOptions, PaymentRequest
from girocode.modules.epc_qr.service import (
    GiroCodeGenerator,
    GiroCodeService,
    generate_girocode,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _request(**overrides: object) -> PaymentRequest:
    fields: dict[str, object] = {
        "beneficiary": "Kenan",
        "iban": "DE74500105176879856947",
        "remittance": "Test subject",
        "amount": Decimal("1.44"),
        "bic": "INGDDEFFXXX",
    }
    fields.update(overrides)
    return PaymentRequest(**fields)  # type: ignore[arg-type]


@pytest.fixture()
def service() -> GiroCodeService:
    return GiroCodeService()


class TestGenerateCode:
    def test_reference_transfer_produces_png(self, service: GiroCodeService) -> None:
        image = service.generate_code(_request())

        assert image.startswith(PNG_SIGNATURE)
        with Image.open(io.BytesIO(image)) as img:
            width, height = img.size
        assert height == width + 15

    def test_oversized_remittance_fails_with_payload_too_large(
        self, service: GiroCodeService
    ) -> None:
        with pytest.raises(GenerationFailedError) as exc_info:
            service.generate_code(_request(remittance="ä" * 180))

        cause = exc_info.value.cause
        assert isinstance(cause, PayloadTooLargeError)
        assert exc_info.value.__cause__ is cause
        assert cause.byte_length == 430

    def test_oversized_text_fits_with_latin1(self, service: GiroCodeService) -> None:
        image = service.generate_code(
            _request(remittance="ä" * 180, charset=CharacterSet.ISO8859_1)
        )
        assert image.startswith(PNG_SIGNATURE)

    def test_huge_amount_is_an_argument_error(self, service: GiroCodeService) -> None:
        request = _request().model_copy(update={"amount": Decimal("1E+26")})

        with pytest.raises(GenerationFailedError) as exc_info:
            service.generate_code(request)

        assert isinstance(exc_info.value.cause, InvalidArgumentError)

    def test_blank_iban_is_wrapped_without_rendering(self) -> None:
        renderer = MagicMock(spec=GiroCodeRenderer)
        service = GiroCodeService(renderer=renderer)

        with pytest.raises(GenerationFailedError) as exc_info:
            service.generate_code(_request(iban="   "))

        assert isinstance(exc_info.value.cause, InvalidArgumentError)
        renderer.encode_matrix.assert_not_called()
        renderer.render.assert_not_called()

    def test_oversized_payload_never_reaches_encoder(self) -> None:
        renderer = MagicMock(spec=GiroCodeRenderer)
        service = GiroCodeService(renderer=renderer)

        with pytest.raises(GenerationFailedError):
            service.generate_code(_request(remittance="x" * 400))

        renderer.encode_matrix.assert_not_called()

    def test_unsupported_character_is_wrapped(self, service: GiroCodeService) -> None:
        with pytest.raises(GenerationFailedError) as exc_info:
            service.generate_code(_request(beneficiary="Иван", charset=CharacterSet.ISO8859_7))
        assert isinstance(exc_info.value.cause, UnsupportedCharacterError)

    def test_rendering_error_is_wrapped(self) -> None:
        renderer = MagicMock(spec=GiroCodeRenderer)
        renderer.render.side_effect = OSError("disk full")
        service = GiroCodeService(renderer=renderer)

        with pytest.raises(GenerationFailedError) as exc_info:
            service.generate_code(_request())

        assert isinstance(exc_info.value.cause, OSError)
        assert "disk full" in str(exc_info.value)

    def test_encoder_receives_charset_encoded_bytes(self) -> None:
        renderer = MagicMock(spec=GiroCodeRenderer)
        renderer.render.return_value = b"png"
        service = GiroCodeService(renderer=renderer)

        service.generate_code(_request(remittance="Grüße", charset=CharacterSet.ISO8859_1))

        data = renderer.encode_matrix.call_args.args[0]
        assert data.endswith("Grüße\n".encode("iso-8859-1"))
        assert data.startswith(b"BCD\n002\n2\nSCT\n")

    def test_caption_options_are_passed_to_renderer(self) -> None:
        renderer = MagicMock(spec=GiroCodeRenderer)
        renderer.render.return_value = b"png"
        caption = CaptionOptions(text="Zahlen mit Code", size=14)
        service = GiroCodeService(caption=caption, renderer=renderer)

        service.generate_code(_request())

        assert renderer.render.call_args.args[1] == caption

    def test_service_implements_generator_protocol(self, service: GiroCodeService) -> None:
        assert isinstance(service, GiroCodeGenerator)


class TestGenerateGirocode:
    def test_generates_from_plain_fields(self) -> None:
        image = generate_girocode(
            "Kenan",
            "DE74500105176879856947",
            "Test subject",
            1.44,
            "INGDDEFFXXX",
        )
        assert image.startswith(PNG_SIGNATURE)

    def test_negative_amount_is_wrapped(self) -> None:
        with pytest.raises(GenerationFailedError) as exc_info:
            generate_girocode("Kenan", "DE74500105176879856947", "Test", Decimal("-1"))
        assert isinstance(exc_info.value.cause, ValueError)

    def test_empty_iban_is_wrapped(self) -> None:
        with pytest.raises(GenerationFailedError) as exc_info:
            generate_girocode("Kenan", "", "Test", Decimal("1"))
        assert isinstance(exc_info.value.cause, InvalidArgumentError)


class TestRenderer:
    def test_matrix_uses_error_correction_m(self) -> None:
        qr = GiroCodeRenderer().encode_matrix(b"BCD\n002\n1\nSCT\n")
        assert qr.error_correction == qrcode.constants.ERROR_CORRECT_M

    def test_version_grows_with_payload(self) -> None:
        renderer = GiroCodeRenderer()
        small = renderer.encode_matrix(b"x" * 20)
        large = renderer.encode_matrix(b"x" * 331)
        assert large.version > small.version

    def test_layout_follows_module_size_and_offset(self) -> None:
        renderer = GiroCodeRenderer(module_size=4, caption_offset=20, border=4)
        qr = renderer.encode_matrix(b"BCD")
        image = renderer.render(qr, CaptionOptions())

        with Image.open(io.BytesIO(image)) as img:
            width, height = img.size
            top_left = img.convert("RGB").getpixel((0, 0))

        assert width == (qr.modules_count + 8) * 4
        assert height == width + 20
        assert top_left == (255, 255, 255)

    def test_missing_font_falls_back_to_default(self) -> None:
        renderer = GiroCodeRenderer(font_path="/nonexistent/font.ttf")
        image = renderer.render(renderer.encode_matrix(b"BCD"), CaptionOptions(size=12))
        assert image.startswith(PNG_SIGNATURE)

    def test_empty_caption_renders_frame_only(self) -> None:
        renderer = GiroCodeRenderer()
        image = renderer.render(renderer.encode_matrix(b"BCD"), CaptionOptions(text=""))
        assert image.startswith(PNG_SIGNATURE)


class TestPaymentRequest:
    def test_is_immutable(self) -> None:
        request = _request()
        with pytest.raises(ValueError):
            request.iban = "DE00"  # type: ignore[misc]

    def test_defaults(self) -> None:
        request = PaymentRequest(beneficiary="Kenan", iban="DE74", amount=Decimal("1"))
        assert request.charset is CharacterSet.UTF8
        assert request.bic == ""
        assert request.reference == ""

    def test_rejects_negative_amount(self) -> None:
        with pytest.raises(ValueError):
            _request(amount=Decimal("-0.01"))

    def test_rejects_amount_above_maximum(self) -> None:
        with pytest.raises(ValueError):
            _request(amount=Decimal("1E+26"))


class TestPayloadEmpty:
    def test_error_reports_zero_length(self) -> None:
        assert PayloadEmptyError().byte_length == 0
