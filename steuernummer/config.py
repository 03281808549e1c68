from __future__ import annotations
import os
from dataclasses import dataclass

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    finanzamt_file: str | None = None
    allow_legacy_separators: bool = False
    lenient: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            finanzamt_file=os.getenv("STEUERNUMMER_FINANZAMT_FILE") or None,
            allow_legacy_separators=_env_flag("STEUERNUMMER_LEGACY_SEPARATORS"),
            lenient=_env_flag("STEUERNUMMER_LENIENT"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )
