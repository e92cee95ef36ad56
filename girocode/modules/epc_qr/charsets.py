"""Character sets permitted by the EPC QR standard (EPC069-12).

The numeric value of each member is the code written on the payload's
character-set line. ``CHARSET_ENCODINGS`` maps every member to the Python
codec used to measure and encode the payload.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType


class CharacterSet(IntEnum):
    """Character set identifiers from the EPC QR version 002 payload."""

    UTF8 = 1
    ISO8859_1 = 2
    ISO8859_2 = 3
    ISO8859_4 = 4
    ISO8859_5 = 5
    ISO8859_7 = 6
    ISO8859_10 = 7
    ISO8859_15 = 8


CHARSET_ENCODINGS: MappingProxyType[CharacterSet, str] = MappingProxyType(
    {
        CharacterSet.UTF8: "UTF-8",
        CharacterSet.ISO8859_1: "ISO-8859-1",
        CharacterSet.ISO8859_2: "ISO-8859-2",
        CharacterSet.ISO8859_4: "ISO-8859-4",
        CharacterSet.ISO8859_5: "ISO-8859-5",
        CharacterSet.ISO8859_7: "ISO-8859-7",
        CharacterSet.ISO8859_10: "ISO-8859-10",
        CharacterSet.ISO8859_15: "ISO-8859-15",
    }
)


def encoding_for(charset: CharacterSet | int) -> str | None:
    """Return the codec name for *charset*, or None if it has no table entry."""
    return CHARSET_ENCODINGS.get(charset)  # type: ignore[call-overload]
