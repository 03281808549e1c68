from __future__ import annotations
import re

from .models import ErrorKind

MIN_DIGITS = 10
MAX_DIGITS = 13

# Digits plus the separators printed on tax notices ("/" and blanks).
_ALLOWED_PATTERN = re.compile(r"[0-9 /]*")
# Older input forms also used "-" and "_" as separators.
_ALLOWED_LEGACY_PATTERN = re.compile(r"[0-9 /_\-]*")
_DIGIT_PATTERN = re.compile(r"[0-9]")


def sanitize(raw: str, allow_legacy_separators: bool = False) -> str | ErrorKind:
    """Return the digit sequence of raw, or the ErrorKind of the first violation."""
    pattern = _ALLOWED_LEGACY_PATTERN if allow_legacy_separators else _ALLOWED_PATTERN
    if not pattern.fullmatch(raw):
        return ErrorKind.ALLOWED_CHARACTERS

    digits = "".join(_DIGIT_PATTERN.findall(raw))
    if len(digits) < MIN_DIGITS:
        return ErrorKind.TOO_SHORT
    if len(digits) > MAX_DIGITS:
        return ErrorKind.TOO_LONG
    return digits
