"""Prüfziffer calculation for normalized (13-digit) Steuernummern.

Three procedures are in use, cf. the ELSTER document "Prüfung der Steuer- und
Steueridentifikationsnummer":

* 2er-Verfahren: Baden-Württemberg, Hessen, Schleswig-Holstein
* modifiziertes 11er-Verfahren: Rheinland-Pfalz
* 11er-Verfahren: all other Bundesländer, each with its own factors

Only the first 12 digits are weighted; the 13th is the Prüfziffer itself.
"""
from __future__ import annotations
from enum import Enum
from math import ceil

from .models import Bundesland


class Verfahren(str, Enum):
    ZWEIER = "2er"
    MODIFIED_ELFER = "modified_11er"
    ELFER = "11er"


_SUMMANDS_2ER = [0, 0, 9, 8, 0, 7, 6, 5, 4, 3, 2, 1]
_FACTORS_2ER = [0, 0, 512, 256, 0, 128, 64, 32, 16, 8, 4, 2]

_FACTORS_MODIFIED_11ER = [0, 0, 1, 2, 0, 1, 2, 1, 2, 1, 2, 1]

_FACTORS_BPV = [0, 5, 4, 3, 0, 2, 7, 6, 5, 4, 3, 2]
_FACTORS_NI = [0, 0, 2, 9, 0, 8, 7, 6, 5, 4, 3, 2]
_FACTORS_HB_HH = [0, 0, 4, 3, 0, 2, 7, 6, 5, 4, 3, 2]

# Berlin ran two schemes side by side, A and B; a number is accepted under either.
BERLIN_A = "DE-BE-A"
BERLIN_B = "DE-BE-B"

FACTORS_11ER: dict[str, list[int]] = {
    Bundesland.BY.value: _FACTORS_BPV,
    BERLIN_A: [0, 0, 0, 0, 0, 7, 6, 5, 8, 4, 3, 2],
    BERLIN_B: _FACTORS_NI,
    Bundesland.BB.value: _FACTORS_BPV,
    Bundesland.HB.value: _FACTORS_HB_HH,
    Bundesland.HH.value: _FACTORS_HB_HH,
    Bundesland.MV.value: _FACTORS_BPV,
    Bundesland.NI.value: _FACTORS_NI,
    Bundesland.NW.value: [0, 3, 2, 1, 0, 7, 6, 5, 4, 3, 2, 1],
    Bundesland.SL.value: _FACTORS_BPV,
    Bundesland.SN.value: _FACTORS_BPV,
    Bundesland.ST.value: _FACTORS_BPV,
    Bundesland.TH.value: _FACTORS_BPV,
}

VERFAHREN: dict[Bundesland, Verfahren] = {
    land: Verfahren.ELFER for land in Bundesland
}
VERFAHREN.update(
    {
        Bundesland.BW: Verfahren.ZWEIER,
        Bundesland.HE: Verfahren.ZWEIER,
        Bundesland.SH: Verfahren.ZWEIER,
        Bundesland.RP: Verfahren.MODIFIED_ELFER,
    }
)


def _digit_sum(number: int) -> int:
    total = 0
    while number:
        total += number % 10
        number //= 10
    return total


def pruefziffer_2er(normalized: str) -> int:
    products = [
        ((int(normalized[i]) + _SUMMANDS_2ER[i]) % 10) * _FACTORS_2ER[i]
        for i in range(12)
    ]
    # Reduce repeatedly: a single cross sum can still exceed 9.
    reduced = [_digit_sum(p) for p in products]
    while any(r > 9 for r in reduced):
        reduced = [_digit_sum(r) for r in reduced]

    total = sum(reduced)
    if total % 10 == 0:
        return 0
    return 10 * ceil(total / 10) - total


def pruefziffer_modified_11er(normalized: str) -> int:
    products = [int(normalized[i]) * _FACTORS_MODIFIED_11ER[i] for i in range(12)]
    total = sum(p % 10 + 1 if p > 9 else p for p in products)
    return 10 * ceil(total / 10) - total


def pruefziffer_11er(normalized: str, land: Bundesland | str) -> int:
    """land is a Bundesland or one of BERLIN_A / BERLIN_B."""
    key = land.value if isinstance(land, Bundesland) else land
    factors = FACTORS_11ER[key]
    total = sum(int(normalized[i]) * factors[i] for i in range(12))

    if key == Bundesland.NW.value:
        return total % 11
    if total % 11 == 0:
        return 0
    return 11 * ceil(total / 11) - total


def _pruefziffern_for(normalized: str, land: Bundesland) -> set[int]:
    verfahren = VERFAHREN[land]
    if verfahren is Verfahren.ZWEIER:
        return {pruefziffer_2er(normalized)}
    if verfahren is Verfahren.MODIFIED_ELFER:
        return {pruefziffer_modified_11er(normalized)}
    if land is Bundesland.BE:
        return {
            pruefziffer_11er(normalized, BERLIN_A),
            pruefziffer_11er(normalized, BERLIN_B),
        }
    return {pruefziffer_11er(normalized, land)}


def accepted_pruefziffern(
    normalized: str, states: frozenset[Bundesland]
) -> frozenset[int]:
    """All check digits acceptable for any of states; empty if states is empty.

    Candidate sets derived from a prefix ({BB, SN, ST}, {MV, TH}) share their
    factors, so the union has a single element there.
    """
    accepted: set[int] = set()
    for land in states:
        accepted |= _pruefziffern_for(normalized, land)
    return frozenset(accepted)
