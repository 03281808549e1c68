from __future__ import annotations
import pytest
from steuernummer import Bundesland, ErrorKind, FinanzamtRegistry
from steuernummer.constraints import (
    check_bezirksnummer,
    check_constraints,
    check_nw_consistency,
    check_pruefziffer,
)

BY = frozenset({Bundesland.BY})
NW = frozenset({Bundesland.NW})


@pytest.mark.parametrize("bezirk", ["000", "998", "999"])
def test_forbidden_bezirksnummer(bezirk: str) -> None:
    assert check_bezirksnummer(bezirk, frozenset({Bundesland.BW})) is ErrorKind.BEZIRKSNUMMER


@pytest.mark.parametrize("bezirk", ["0000", "0998", "0999"])
def test_forbidden_bezirksnummer_nw(bezirk: str) -> None:
    assert check_bezirksnummer(bezirk, NW) is ErrorKind.BEZIRKSNUMMER


def test_programmierverbund_floor() -> None:
    assert check_bezirksnummer("099", BY) is ErrorKind.BEZIRKSNUMMER
    assert check_bezirksnummer("100", BY) is None
    assert check_bezirksnummer("099", frozenset({Bundesland.BW})) is None


def test_nw_consistency() -> None:
    assert check_nw_consistency("5133038400005", NW) is ErrorKind.NW_INTERNAL_CONSISTENCY
    assert check_nw_consistency("5133081500009", NW) is None
    assert check_nw_consistency("9181010000005", BY) is None


def test_pruefziffer() -> None:
    assert check_pruefziffer("9181010008151", BY) is None
    assert check_pruefziffer("9181010008152", BY) is ErrorKind.PRUEFZIFFER


def test_unknown_finanzamt() -> None:
    registry = FinanzamtRegistry(["9198"])
    assert check_constraints("9181010008151", "100", BY, registry) is ErrorKind.UNKNOWN_FINANZAMT
    assert check_constraints("9198081508152", "815", BY, registry) is None


def test_no_registry_skips_finanzamt_check() -> None:
    assert check_constraints("9181010008151", "100", BY) is None
