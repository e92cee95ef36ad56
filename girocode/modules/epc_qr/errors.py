"""Exceptions raised while building, validating and rendering a GiroCode."""

from __future__ import annotations

from girocode.modules.epc_qr.charsets import CharacterSet


class GiroCodeError(ValueError):
    """Base class for all GiroCode failures."""


class InvalidArgumentError(GiroCodeError):
    """A payment field is missing or out of range."""


class UnsupportedCharacterError(GiroCodeError):
    """The payload contains a character the selected character set cannot encode."""

    def __init__(self, charset: CharacterSet | int, character: str) -> None:
        self.charset = charset
        self.character = character
        name = charset.name if isinstance(charset, CharacterSet) else str(charset)
        super().__init__(f"Character {character!r} (U+{ord(character):04X}) cannot be encoded in {name}")


class PayloadSizeError(GiroCodeError):
    """The encoded payload is outside the size range allowed by the standard."""

    def __init__(self, message: str, byte_length: int) -> None:
        self.byte_length = byte_length
        super().__init__(message)


class PayloadEmptyError(PayloadSizeError):
    def __init__(self) -> None:
        super().__init__("Encoded payload is empty", 0)


class PayloadTooLargeError(PayloadSizeError):
    def __init__(self, byte_length: int, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"Encoded payload is {byte_length} bytes; the maximum is {limit}",
            byte_length,
        )


class GenerationFailedError(GiroCodeError):
    """Umbrella error returned to callers of the generator.

    The underlying failure is available as ``cause`` (and ``__cause__``).
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"GiroCode generation failed: {cause}")
