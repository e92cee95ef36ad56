"""
Pydantic schemas for GiroCode payment requests and rendering options.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from girocode.core.config import get_settings
from girocode.modules.epc_qr.charsets import CharacterSet
from girocode.modules.epc_qr.payload import MAX_AMOUNT


class PaymentRequest(BaseModel):
    """SEPA credit transfer fields encoded into a GiroCode."""

    model_config = ConfigDict(frozen=True)

    beneficiary: str = Field(description="Name of the payee")
    iban: str = Field(description="Payee IBAN, surrounding whitespace allowed")
    remittance: str = Field(default="", description="Unstructured remittance information")
    amount: Decimal = Field(ge=0, le=MAX_AMOUNT, description="Amount in EUR")
    bic: str = Field(default="", description="Payee BIC")
    reference: str = Field(default="", description="Structured creditor reference")
    charset: CharacterSet = Field(
        default=CharacterSet.UTF8,
        description="Character set used to encode the payload",
    )


class CaptionOptions(BaseModel):
    """Caption drawn on the top edge of the rendered code."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="Giro-Code")
    size: int = Field(default=20, ge=1, le=200, description="Font size in pixels")

    @classmethod
    def from_settings(cls) -> "CaptionOptions":
        settings = get_settings()
        return cls(
            text=settings.girocode_caption_text,
            size=settings.girocode_caption_size,
        )
