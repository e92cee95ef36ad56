"""Builder for the EPC QR (GiroCode) version 002 text payload.

The payload is eleven newline-terminated lines in a fixed order, which
receiving banking apps parse positionally:

    BCD / 002 / <charset> / SCT / <BIC> / <name> / <IBAN> / EUR<amount> /
    CHAR / <reference> / <remittance>
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from girocode.modules.epc_qr.charsets import CharacterSet
from girocode.modules.epc_qr.errors import InvalidArgumentError

SERVICE_TAG = "BCD"
VERSION = "002"
IDENTIFICATION = "SCT"
CURRENCY = "EUR"
# Placeholder emitted on the purpose line; not an ISO 20022 purpose code.
PURPOSE_PLACEHOLDER = "CHAR"
LINE_TERMINATOR = "\n"

_CENTS = Decimal("0.01")
# Largest amount the EPC QR amount field accepts
MAX_AMOUNT = Decimal("999999999.99")


def format_amount(amount: Decimal | float | int | str) -> str:
    """Format *amount* as ``EUR`` followed by a two-decimal fixed-point value.

    Rounds half-up at the second decimal and always uses ``.`` as the
    separator, independent of the process locale.

    Raises:
        InvalidArgumentError: If the amount is not a finite, non-negative number
            no greater than MAX_AMOUNT.
    """
    if isinstance(amount, float):
        amount = str(amount)
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Amount is not a number: {amount!r}") from e

    if not value.is_finite():
        raise InvalidArgumentError("Amount must be finite")
    if value < 0:
        raise InvalidArgumentError("Amount must not be negative")
    if value > MAX_AMOUNT:
        raise InvalidArgumentError(f"Amount is out of range; the maximum is {MAX_AMOUNT}")

    # -0 would otherwise render as "-0.00"
    quantized = value.copy_abs().quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{CURRENCY}{quantized:f}"


def build_payload(
    beneficiary: str,
    iban: str,
    remittance: str,
    amount: Decimal | float | int | str,
    bic: str | None = None,
    reference: str | None = None,
    charset: CharacterSet | int = CharacterSet.UTF8,
) -> str:
    """
    Build the canonical GiroCode payload.

    Args:
        beneficiary: Name of the payee
        iban: Payee IBAN; surrounding whitespace is removed
        remittance: Unstructured remittance information
        amount: Amount in EUR
        bic: Payee BIC (optional)
        reference: Structured creditor reference (optional)
        charset: Character set announced on line 3

    Returns:
        The payload text, every line terminated by ``\\n``

    Raises:
        InvalidArgumentError: If the IBAN is blank or the amount is invalid
    """
    if iban is None or not iban.strip():
        raise InvalidArgumentError("IBAN is empty")

    lines = [
        SERVICE_TAG,
        VERSION,
        str(int(charset)),
        IDENTIFICATION,
        bic or "",
        beneficiary or "",
        iban.strip(),
        format_amount(amount),
        PURPOSE_PLACEHOLDER,
        reference or "",
        remittance or "",
    ]
    return "".join(line + LINE_TERMINATOR for line in lines)
