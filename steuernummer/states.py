from __future__ import annotations

from .models import Bundesland, ErrorKind

# Leading digits of a 12/13-digit Steuernummer -> Bundesländer.
# Ordered so that two-digit prefixes are tried before the single "1" (Saarland)
# which would otherwise shadow "11" (Berlin) and the "2x" prefixes.
_PREFIX_TABLE: list[tuple[str, frozenset[Bundesland]]] = [
    ("9", frozenset({Bundesland.BY})),
    ("5", frozenset({Bundesland.NW})),
    ("4", frozenset({Bundesland.MV, Bundesland.TH})),
    ("3", frozenset({Bundesland.BB, Bundesland.SN, Bundesland.ST})),
    ("28", frozenset({Bundesland.BW})),
    ("27", frozenset({Bundesland.RP})),
    ("26", frozenset({Bundesland.HE})),
    ("24", frozenset({Bundesland.HB})),
    ("23", frozenset({Bundesland.NI})),
    ("22", frozenset({Bundesland.HH})),
    ("21", frozenset({Bundesland.SH})),
    ("11", frozenset({Bundesland.BE})),
    ("1", frozenset({Bundesland.SL})),
]

STATE_PREFIXES: dict[Bundesland, str] = {
    land: prefix for prefix, laender in _PREFIX_TABLE for land in laender
}

# Bundesländer using the software of the "Bayerischer Programmierverbund".
PROGRAMMIERVERBUND = frozenset(
    {
        Bundesland.BY,
        Bundesland.BB,
        Bundesland.MV,
        Bundesland.SL,
        Bundesland.SN,
        Bundesland.ST,
        Bundesland.TH,
    }
)

# Digit count of the Standardschema der Länder per Bundesland.
LOCAL_SCHEMA_LENGTHS: dict[Bundesland, int] = {
    Bundesland.BW: 10,
    Bundesland.BE: 10,
    Bundesland.HB: 10,
    Bundesland.HH: 10,
    Bundesland.NI: 10,
    Bundesland.RP: 10,
    Bundesland.SH: 10,
    Bundesland.BY: 11,
    Bundesland.BB: 11,
    Bundesland.MV: 11,
    Bundesland.SL: 11,
    Bundesland.SN: 11,
    Bundesland.ST: 11,
    Bundesland.TH: 11,
    Bundesland.HE: 11,
    Bundesland.NW: 11,
}


def states_for_prefix(digits: str) -> frozenset[Bundesland]:
    """Candidate Bundesländer of a federal-scheme number; empty if not derivable."""
    if len(digits) not in (12, 13):
        return frozenset()
    for prefix, laender in _PREFIX_TABLE:
        if digits.startswith(prefix):
            return laender
    return frozenset()


def prefix_for_states(states: frozenset[Bundesland]) -> str | ErrorKind:
    prefixes = {STATE_PREFIXES[land] for land in states}
    if len(prefixes) != 1:
        return ErrorKind.UNKNOWN_STATE_PREFIX
    return prefixes.pop()


def states_with_local_length(length: int) -> frozenset[Bundesland]:
    return frozenset(
        land for land, expected in LOCAL_SCHEMA_LENGTHS.items() if expected == length
    )
