from __future__ import annotations
import dataclasses
import pytest
from steuernummer import (
    DEFAULT_ERROR_MESSAGES as MSG,
    Bundesland,
    ErrorKind,
    ParsedSteuernummer,
    SteuernummerError,
    parse_steuernummer,
    parse_steuernummer_result,
)

BW_2866 = ParsedSteuernummer(
    bundesfinanzamtnummer="2866",
    bezirksnummer="815",
    unterscheidungsnummer="0815",
    pruefziffer="6",
    normalized_steuernummer="2866081508156",
    state_prefix="28",
    states=frozenset({Bundesland.BW}),
)

NW_5133 = ParsedSteuernummer(
    bundesfinanzamtnummer="5133",
    bezirksnummer="8150",
    unterscheidungsnummer="815",
    pruefziffer="9",
    normalized_steuernummer="5133081508159",
    state_prefix="5",
    states=frozenset({Bundesland.NW}),
)

MULTIPLE_3201 = ParsedSteuernummer(
    bundesfinanzamtnummer="3201",
    bezirksnummer="123",
    unterscheidungsnummer="1234",
    pruefziffer="0",
    normalized_steuernummer="3201012312340",
    state_prefix="3",
    states=frozenset({Bundesland.BB, Bundesland.SN, Bundesland.ST}),
)


@pytest.mark.parametrize("value", ["2866 0 815 08156", "2866 815 08156"])
def test_federal_schemes(value: str) -> None:
    assert parse_steuernummer(value) == BW_2866


@pytest.mark.parametrize("value", ["5133/0/8150/815/9", "5133/8150/815/9"])
def test_federal_schemes_nw(value: str) -> None:
    assert parse_steuernummer(value) == NW_5133


@pytest.mark.parametrize("value", ["3201012312340", "320112312340"])
def test_multiple_states(value: str) -> None:
    parsed = parse_steuernummer(value)
    assert parsed == MULTIPLE_3201
    assert parsed.state is None


@pytest.mark.parametrize("value", ["3201012312340", "320112312340"])
def test_bundesland_narrows_states(value: str) -> None:
    parsed = parse_steuernummer(value, bundesland="DE-SN")
    assert parsed == dataclasses.replace(MULTIPLE_3201, states=frozenset({Bundesland.SN}))
    assert parsed.state is Bundesland.SN


@pytest.mark.parametrize(
    ("value", "land", "finanzamt", "bezirk", "unterscheidung", "pruefziffer", "prefix", "normalized"),
    [
        ("93815/08152", Bundesland.BW, "2893", "815", "0815", "2", "28", "2893081508152"),
        ("098/815/08157", Bundesland.MV, "4098", "815", "0815", "7", "4", "4098081508157"),
        ("053 815 08158", Bundesland.HE, "2653", "815", "0815", "8", "26", "2653081508158"),
        ("400/8150/8159", Bundesland.NW, "5400", "8150", "815", "9", "5", "5400081508159"),
    ],
)
def test_laender_scheme(value, land, finanzamt, bezirk, unterscheidung, pruefziffer, prefix, normalized):
    parsed = parse_steuernummer(value, bundesland=land)
    assert parsed == ParsedSteuernummer(
        bundesfinanzamtnummer=finanzamt,
        bezirksnummer=bezirk,
        unterscheidungsnummer=unterscheidung,
        pruefziffer=pruefziffer,
        normalized_steuernummer=normalized,
        state_prefix=prefix,
        states=frozenset({land}),
    )


def test_formatted() -> None:
    assert BW_2866.formatted == "2866 0 815 0815 6"
    assert NW_5133.formatted == "5133 0 8150 815 9"


def test_parse_ignores_business_rules() -> None:
    # Bezirk 099 and a wrong Prüfziffer are structurally fine
    parsed = parse_steuernummer("9181009908150")
    assert parsed.bezirksnummer == "099"
    assert parsed.pruefziffer == "0"


def test_parse_raises() -> None:
    with pytest.raises(SteuernummerError) as exc_info:
        parse_steuernummer("9381508152")
    assert exc_info.value.kind is ErrorKind.MISSING_STATE_INFORMATION
    assert str(exc_info.value) == MSG.missing_state_information


def test_parse_raises_with_custom_message() -> None:
    with pytest.raises(SteuernummerError, match="falsches Land"):
        parse_steuernummer(
            "304881508155",
            bundesland="BW",
            error_messages={"wrong_state": "falsches Land"},
        )


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_steuernummer("1123 4 17891051")


def test_parse_result() -> None:
    ok = parse_steuernummer_result("2866081508156")
    assert ok.ok
    assert ok.unwrap() == BW_2866

    failed = parse_steuernummer_result("129043abc")
    assert not failed.ok
    assert failed.value is None
    assert failed.error.kind is ErrorKind.ALLOWED_CHARACTERS
    with pytest.raises(SteuernummerError):
        failed.unwrap()
