"""steuernummer: Prüfung und Normalisierung deutscher Steuernummern."""
from .errors import (
    DEFAULT_ERROR_MESSAGES,
    ErrorMessages,
    SteuernummerError,
    merge_error_messages,
)
from .finanzamt import FinanzamtRegistry
from .models import Bundesland, ErrorKind, ParsedSteuernummer, ParseResult
from .validator import (
    SteuernummerValidator,
    parse_steuernummer,
    parse_steuernummer_result,
    validate_steuernummer,
)

__all__ = [
    "Bundesland",
    "DEFAULT_ERROR_MESSAGES",
    "ErrorKind",
    "ErrorMessages",
    "FinanzamtRegistry",
    "ParsedSteuernummer",
    "ParseResult",
    "SteuernummerError",
    "SteuernummerValidator",
    "merge_error_messages",
    "parse_steuernummer",
    "parse_steuernummer_result",
    "validate_steuernummer",
]
