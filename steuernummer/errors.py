from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Mapping

from .models import ErrorKind


@dataclass(frozen=True)
class ErrorMessages:
    """User-facing message per ErrorKind. Field names equal the ErrorKind values."""

    allowed_characters: str = 'Bitte nur Ziffern, "/" oder Leerzeichen verwenden'
    too_short: str = "Eine Steuernummer muss mindestens 10 Ziffern enthalten"
    too_long: str = "Eine Steuernummer darf maximal 13 Ziffern enthalten"
    wrong_length_for_state: str = (
        "Die Anzahl der Ziffern passt nicht zum angegebenen Bundesland"
    )
    parse: str = "Die Steuernummer entspricht nicht dem Schema des Bundeslandes"
    missing_zero: str = (
        "Steuernummern zur elektronischen Übermittlung müssen an 5. Stelle "
        'eine "0" aufweisen'
    )
    unknown_state_prefix: str = (
        "Die Steuernummer kann keinem Bundesland zugewiesen werden"
    )
    unknown_finanzamt: str = (
        "Die Steuernummer enthält eine unbekannte Bundesfinanzamtsnummer"
    )
    wrong_state: str = "Die Steuernummer entspricht nicht dem angegebenen Bundesland"
    bezirksnummer: str = "Die Steuernummer enthält eine invalide Bezirksnummer"
    pruefziffer: str = "Die Prüfziffer der Steuernummer stimmt nicht"
    nw_internal_consistency: str = (
        "Die interne Konsistenz der Steuernummer ist nicht gegeben"
    )
    missing_state_information: str = (
        "Für Steuernummern mit weniger als 12 Ziffern muss das Bundesland "
        "angegeben werden"
    )

    def get(self, kind: ErrorKind) -> str:
        return getattr(self, kind.value)


DEFAULT_ERROR_MESSAGES = ErrorMessages()


def merge_error_messages(
    overrides: Mapping[ErrorKind | str, str] | ErrorMessages | None = None,
    base: ErrorMessages = DEFAULT_ERROR_MESSAGES,
) -> ErrorMessages:
    """Return base with the given keys replaced. Unknown keys raise ValueError."""
    if overrides is None:
        return base
    if isinstance(overrides, ErrorMessages):
        return overrides
    changes = {ErrorKind(key).value: str(msg) for key, msg in overrides.items()}
    return replace(base, **changes)


class SteuernummerError(ValueError):
    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"SteuernummerError({self.kind.value!r}, {self.message!r})"
