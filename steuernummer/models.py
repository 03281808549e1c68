from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import SteuernummerError


class Bundesland(str, Enum):
    BW = "DE-BW"
    BY = "DE-BY"
    BE = "DE-BE"
    BB = "DE-BB"
    HB = "DE-HB"
    HH = "DE-HH"
    HE = "DE-HE"
    MV = "DE-MV"
    NI = "DE-NI"
    NW = "DE-NW"
    RP = "DE-RP"
    SL = "DE-SL"
    SN = "DE-SN"
    ST = "DE-ST"
    SH = "DE-SH"
    TH = "DE-TH"

    @classmethod
    def from_code(cls, code: Bundesland | str) -> Bundesland:
        """Accept "DE-BW", "BW" or a member; raise ValueError otherwise."""
        if isinstance(code, cls):
            return code
        value = str(code).strip().upper()
        if not value.startswith("DE-"):
            value = "DE-" + value
        return cls(value)


class ErrorKind(str, Enum):
    ALLOWED_CHARACTERS = "allowed_characters"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    WRONG_LENGTH_FOR_STATE = "wrong_length_for_state"
    PARSE = "parse"
    MISSING_ZERO = "missing_zero"
    UNKNOWN_STATE_PREFIX = "unknown_state_prefix"
    UNKNOWN_FINANZAMT = "unknown_finanzamt"
    WRONG_STATE = "wrong_state"
    BEZIRKSNUMMER = "bezirksnummer"
    PRUEFZIFFER = "pruefziffer"
    NW_INTERNAL_CONSISTENCY = "nw_internal_consistency"
    MISSING_STATE_INFORMATION = "missing_state_information"


@dataclass(frozen=True)
class ParsedSteuernummer:
    bundesfinanzamtnummer: str
    bezirksnummer: str
    unterscheidungsnummer: str
    pruefziffer: str
    normalized_steuernummer: str
    state_prefix: str
    states: frozenset[Bundesland]

    @property
    def state(self) -> Bundesland | None:
        """The Bundesland if it is unambiguous, else None."""
        if len(self.states) == 1:
            return next(iter(self.states))
        return None

    @property
    def formatted(self) -> str:
        """Electronic scheme grouped for display, e.g. "2866 0 815 0815 6"."""
        return " ".join(
            [
                self.bundesfinanzamtnummer,
                "0",
                self.bezirksnummer,
                self.unterscheidungsnummer,
                self.pruefziffer,
            ]
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: exactly one of value and error is set."""

    value: ParsedSteuernummer | None = None
    error: SteuernummerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ParsedSteuernummer:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
