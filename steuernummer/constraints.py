from __future__ import annotations

from .checksum import accepted_pruefziffern
from .finanzamt import FinanzamtRegistry
from .models import Bundesland, ErrorKind
from .states import PROGRAMMIERVERBUND

# Bezirksnummern that are never assigned (ELSTER, "Prüfung der Steuernummer").
FORBIDDEN_BEZIRKSNUMMERN = frozenset({"000", "998", "999", "0000", "0998", "0999"})

# NW: Unterscheidungsnummer + Prüfziffer (UUUP) below this value are not issued.
_NW_MIN_UUUP = 9


def check_bezirksnummer(bezirksnummer: str, states: frozenset[Bundesland]) -> ErrorKind | None:
    if bezirksnummer in FORBIDDEN_BEZIRKSNUMMERN:
        return ErrorKind.BEZIRKSNUMMER
    if states & PROGRAMMIERVERBUND and int(bezirksnummer) < 100:
        return ErrorKind.BEZIRKSNUMMER
    return None


def check_nw_consistency(normalized: str, states: frozenset[Bundesland]) -> ErrorKind | None:
    if Bundesland.NW in states and int(normalized[-4:]) < _NW_MIN_UUUP:
        return ErrorKind.NW_INTERNAL_CONSISTENCY
    return None


def check_pruefziffer(normalized: str, states: frozenset[Bundesland]) -> ErrorKind | None:
    accepted = accepted_pruefziffern(normalized, states)
    if accepted and int(normalized[-1]) not in accepted:
        return ErrorKind.PRUEFZIFFER
    return None


def check_constraints(
    normalized: str,
    bezirksnummer: str,
    states: frozenset[Bundesland],
    finanzamt_registry: FinanzamtRegistry | None = None,
) -> ErrorKind | None:
    """Return the first violated business rule of a normalized Steuernummer."""
    if finanzamt_registry is not None and not finanzamt_registry.is_known(normalized[:4]):
        return ErrorKind.UNKNOWN_FINANZAMT
    return (
        check_bezirksnummer(bezirksnummer, states)
        or check_nw_consistency(normalized, states)
        or check_pruefziffer(normalized, states)
    )
