"""Validation and parsing of German Steuernummern.

`validate` returns the message of the first violated constraint (or None) and
never raises for bad input. `parse` returns the structured, normalized number
and raises SteuernummerError; `parse_result` returns a ParseResult instead.

Cf. https://download.elster.de/download/schnittstellen/Pruefung_der_Steuer_und_Steueridentifikatsnummer.pdf
"""
from __future__ import annotations
import logging
from typing import Iterable, Mapping

from .constraints import FORBIDDEN_BEZIRKSNUMMERN, check_constraints
from .errors import ErrorMessages, SteuernummerError, merge_error_messages
from .finanzamt import FinanzamtRegistry
from .models import Bundesland, ErrorKind, ParsedSteuernummer, ParseResult
from .sanitizer import sanitize
from .schema import LayoutFields, normalize, parse_layout
from .states import prefix_for_states, states_for_prefix, states_with_local_length

logger = logging.getLogger(__name__)


def _resolve_states(
    digits: str, bundesland: Bundesland | None
) -> frozenset[Bundesland] | ErrorKind:
    """Candidate Bundesländer; empty for a Länder-scheme number without a hint."""
    if len(digits) < 12:
        return frozenset({bundesland}) if bundesland is not None else frozenset()

    derived = states_for_prefix(digits)
    if not derived:
        return ErrorKind.UNKNOWN_STATE_PREFIX
    if bundesland is None:
        return derived
    if bundesland not in derived:
        return ErrorKind.WRONG_STATE
    return frozenset({bundesland})


def _check_without_state(digits: str) -> ErrorKind | None:
    """Checks for a Länder-scheme number whose Bundesland is unknown.

    Only the forbidden Bezirksnummern can be judged without a Bundesland. The
    number is rejected if every Länder layout of its length yields one, so an
    11-digit number with Bezirk "999" in the FFF/BBB reading but "9990" in the
    NW reading passes. A plain reading of digits -8:-5 would reject it.
    """
    bezirke = []
    for land in states_with_local_length(len(digits)):
        fields = parse_layout(digits, frozenset({land}))
        if isinstance(fields, LayoutFields):
            bezirke.append(fields.bezirksnummer)
    if bezirke and all(b in FORBIDDEN_BEZIRKSNUMMERN for b in bezirke):
        return ErrorKind.BEZIRKSNUMMER
    return None


def _as_registry(
    numbers: FinanzamtRegistry | Iterable[str] | None,
) -> FinanzamtRegistry | None:
    if numbers is None or isinstance(numbers, FinanzamtRegistry):
        return numbers
    return FinanzamtRegistry(numbers)


def _as_bundesland(bundesland: Bundesland | str | None) -> Bundesland | None:
    return None if bundesland is None else Bundesland.from_code(bundesland)


class SteuernummerValidator:
    def __init__(
        self,
        error_messages: Mapping[ErrorKind | str, str] | ErrorMessages | None = None,
        finanzamt_registry: FinanzamtRegistry | Iterable[str] | None = None,
        allow_legacy_separators: bool = False,
    ) -> None:
        self._messages = merge_error_messages(error_messages)
        self._registry = _as_registry(finanzamt_registry)
        self._allow_legacy_separators = allow_legacy_separators

    @property
    def error_messages(self) -> ErrorMessages:
        return self._messages

    def _analyse(
        self, value: str, bundesland: Bundesland | None
    ) -> ParsedSteuernummer | ErrorKind:
        digits = sanitize(value, self._allow_legacy_separators)
        if isinstance(digits, ErrorKind):
            return digits
        return self._analyse_digits(digits, bundesland)

    def _analyse_digits(
        self, digits: str, bundesland: Bundesland | None
    ) -> ParsedSteuernummer | ErrorKind:
        states = _resolve_states(digits, bundesland)
        if isinstance(states, ErrorKind):
            return states
        if not states:
            return ErrorKind.MISSING_STATE_INFORMATION

        fields = parse_layout(digits, states)
        if isinstance(fields, ErrorKind):
            return fields
        prefix = prefix_for_states(states)
        if isinstance(prefix, ErrorKind):
            return prefix

        normalized = normalize(fields, prefix)
        return ParsedSteuernummer(
            bundesfinanzamtnummer=normalized[:4],
            bezirksnummer=fields.bezirksnummer,
            unterscheidungsnummer=fields.unterscheidungsnummer,
            pruefziffer=fields.pruefziffer,
            normalized_steuernummer=normalized,
            state_prefix=prefix,
            states=states,
        )

    def error_kind(
        self,
        value: str,
        bundesland: Bundesland | str | None = None,
        lenient: bool = False,
    ) -> ErrorKind | None:
        """Return the first violated constraint, or None for a valid number."""
        hint = _as_bundesland(bundesland)
        digits = sanitize(value, self._allow_legacy_separators)
        if isinstance(digits, ErrorKind):
            return digits

        if lenient and hint is None and len(digits) < 12:
            return _check_without_state(digits)

        parsed = self._analyse_digits(digits, hint)
        if isinstance(parsed, ErrorKind):
            return parsed
        return check_constraints(
            parsed.normalized_steuernummer,
            parsed.bezirksnummer,
            parsed.states,
            self._registry,
        )

    def validate(
        self,
        value: str,
        bundesland: Bundesland | str | None = None,
        lenient: bool = False,
    ) -> str | None:
        kind = self.error_kind(value, bundesland, lenient)
        if kind is None:
            return None
        logger.debug("Steuernummer rejected: %s", kind.value)
        return self._messages.get(kind)

    def parse_result(
        self, value: str, bundesland: Bundesland | str | None = None
    ) -> ParseResult:
        parsed = self._analyse(value, _as_bundesland(bundesland))
        if isinstance(parsed, ErrorKind):
            logger.debug("Steuernummer not parseable: %s", parsed.value)
            return ParseResult(
                error=SteuernummerError(parsed, self._messages.get(parsed))
            )
        return ParseResult(value=parsed)

    def parse(
        self, value: str, bundesland: Bundesland | str | None = None
    ) -> ParsedSteuernummer:
        return self.parse_result(value, bundesland).unwrap()


def validate_steuernummer(
    value: str,
    *,
    bundesland: Bundesland | str | None = None,
    error_messages: Mapping[ErrorKind | str, str] | None = None,
    lenient: bool = False,
    finanzamtnummern: FinanzamtRegistry | Iterable[str] | None = None,
    allow_legacy_separators: bool = False,
) -> str | None:
    """Return None if value is a valid Steuernummer, else the error message.

    Without `bundesland`, numbers with fewer than 12 digits fail with the
    missing-state message unless `lenient` is set.
    """
    validator = SteuernummerValidator(
        error_messages, finanzamtnummern, allow_legacy_separators
    )
    return validator.validate(value, bundesland, lenient)


def parse_steuernummer_result(
    value: str,
    *,
    bundesland: Bundesland | str | None = None,
    error_messages: Mapping[ErrorKind | str, str] | None = None,
    allow_legacy_separators: bool = False,
) -> ParseResult:
    validator = SteuernummerValidator(
        error_messages, allow_legacy_separators=allow_legacy_separators
    )
    return validator.parse_result(value, bundesland)


def parse_steuernummer(
    value: str,
    *,
    bundesland: Bundesland | str | None = None,
    error_messages: Mapping[ErrorKind | str, str] | None = None,
    allow_legacy_separators: bool = False,
) -> ParsedSteuernummer:
    """Parse value into its fields; raises SteuernummerError."""
    return parse_steuernummer_result(
        value,
        bundesland=bundesland,
        error_messages=error_messages,
        allow_legacy_separators=allow_legacy_separators,
    ).unwrap()
