"""Field extraction for the three Steuernummer layouts and normalization.

Layouts by digit count (F = Finanzamt, B = Bezirk, U = Unterscheidungsnummer,
P = Prüfziffer; NW uses four B and three U digits):

* 13 digits, elektronisches Bundesschema:  FFFF 0 BBB UUUU P
* 12 digits, vereinheitlichtes Bundesschema:  FFFF BBB UUUU P
* 10/11 digits, Standardschema der Länder, depending on the Bundesland:
  FF BBB UUUU P, FFF BBB UUUU P, 0FF BBB UUUU P (HE), FFF BBBB UUU P (NW)
"""
from __future__ import annotations
from dataclasses import dataclass

from .models import Bundesland, ErrorKind
from .states import LOCAL_SCHEMA_LENGTHS

NORMALIZED_LENGTH = 13
# Bezirk, Unterscheidungsnummer and Prüfziffer together, in every layout
_TAIL_LENGTH = 8


@dataclass(frozen=True)
class LayoutFields:
    finanzamt: str  # 4 digits for federal layouts, 2 or 3 for the Länder layouts
    bezirksnummer: str
    unterscheidungsnummer: str
    pruefziffer: str

    @property
    def is_federal(self) -> bool:
        return len(self.finanzamt) == 4


def _split_tail(tail: str, nw: bool) -> tuple[str, str, str]:
    bezirk_length = 4 if nw else 3
    return tail[:bezirk_length], tail[bezirk_length:7], tail[7]


def parse_layout(
    digits: str, states: frozenset[Bundesland]
) -> LayoutFields | ErrorKind:
    nw = Bundesland.NW in states

    if len(digits) == 13:
        if digits[4] != "0":
            return ErrorKind.MISSING_ZERO
        finanzamt, tail = digits[:4], digits[5:]
    elif len(digits) == 12:
        finanzamt, tail = digits[:4], digits[4:]
    elif len(digits) in (10, 11):
        if not states:
            return ErrorKind.MISSING_STATE_INFORMATION
        if any(LOCAL_SCHEMA_LENGTHS[land] != len(digits) for land in states):
            return ErrorKind.WRONG_LENGTH_FOR_STATE
        if Bundesland.HE in states:
            # Hessen: 0FF, the leading zero is not part of the Finanzamt number
            if digits[0] != "0":
                return ErrorKind.PARSE
            finanzamt = digits[1:3]
        else:
            finanzamt = digits[: len(digits) - _TAIL_LENGTH]
        tail = digits[-_TAIL_LENGTH:]
    else:
        return ErrorKind.PARSE

    bezirk, unterscheidung, pruefziffer = _split_tail(tail, nw)
    return LayoutFields(finanzamt, bezirk, unterscheidung, pruefziffer)


def normalize(fields: LayoutFields, prefix: str) -> str:
    """Build the 13-digit electronic form; prefix completes a Länder Finanzamt."""
    finanzamt = fields.finanzamt if fields.is_federal else prefix + fields.finanzamt
    normalized = (
        finanzamt
        + "0"
        + fields.bezirksnummer
        + fields.unterscheidungsnummer
        + fields.pruefziffer
    )
    if len(normalized) != NORMALIZED_LENGTH or normalized[4] != "0":
        raise ValueError(f"cannot normalize with prefix {prefix!r}")
    return normalized
