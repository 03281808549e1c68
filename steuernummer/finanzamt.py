from __future__ import annotations
from pathlib import Path
from typing import Iterable


class FinanzamtRegistry:
    """Known four-digit Bundesfinanzamtnummern.

    The official list is published by the tax administration and changes when
    offices merge; it is not bundled. Build the registry from an iterable or a
    text file with one number per line.
    """

    def __init__(self, numbers: Iterable[str] | None = None) -> None:
        self._numbers: set[str] = set()
        for number in numbers or []:
            self.add(number)

    @classmethod
    def from_file(cls, path: str | Path) -> FinanzamtRegistry:
        registry = cls()
        registry._load_file(Path(path))
        return registry

    def _load_file(self, path: Path) -> None:
        with path.open(encoding="utf-8") as fh:
            for line in fh:
                number = line.split("#", 1)[0].strip()
                if number:
                    self.add(number)

    def add(self, number: str) -> None:
        number = str(number).strip()
        if len(number) != 4 or not number.isascii() or not number.isdigit():
            raise ValueError(f"not a Bundesfinanzamtnummer: {number!r}")
        self._numbers.add(number)

    def is_known(self, number: str) -> bool:
        return number in self._numbers

    def __contains__(self, number: object) -> bool:
        return number in self._numbers

    def __len__(self) -> int:
        return len(self._numbers)
