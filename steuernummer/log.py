"""Logging setup that keeps Steuernummern out of log output."""

from __future__ import annotations

import logging
import re
import sys

# 10 to 13 digits, optionally grouped by blanks or "/"
_STEUERNUMMER_PATTERN = re.compile(r"\b\d(?:[ /]?\d){9,12}\b")


def mask(text: str) -> str:
    def _replace(m: re.Match[str]) -> str:
        full = m.group(0)
        return re.sub(r"\d", "*", full[:-4]) + full[-4:]

    return _STEUERNUMMER_PATTERN.sub(_replace, text)


class MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: (mask(v) if isinstance(v, str) else v)
                    for k, v in record.args.items()
                }
            else:
                record.args = tuple(
                    (mask(a) if isinstance(a, str) else a) for a in record.args
                )
        return True


def setup_logger(name: str = "steuernummer", level: str | None = None) -> logging.Logger:
    """Configure name once; later calls only change the level when one is given."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger
    if level is None:
        logger.setLevel(logging.INFO)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s – %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console.addFilter(MaskingFilter())
    logger.addHandler(console)
    return logger
