from __future__ import annotations
import logging
from steuernummer.log import MaskingFilter, mask, setup_logger


def test_mask_plain_number() -> None:
    assert mask("Steuernummer 5133081508159 abgelehnt") == "Steuernummer *********8159 abgelehnt"


def test_mask_grouped_number() -> None:
    assert mask("93815/08152") == "*****/*8152"


def test_mask_leaves_short_numbers() -> None:
    assert mask("Loaded 610 Finanzamt numbers") == "Loaded 610 Finanzamt numbers"


def test_filter_masks_args() -> None:
    record = logging.LogRecord(
        "steuernummer", logging.INFO, __file__, 1, "value %s", ("5133081508159",), None
    )
    assert MaskingFilter().filter(record) is True
    assert record.getMessage() == "value *********8159"


def test_setup_logger_is_idempotent() -> None:
    logger = setup_logger("steuernummer.test", level="DEBUG")
    again = setup_logger("steuernummer.test")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logger_keeps_level_without_argument() -> None:
    logger = setup_logger("steuernummer.test_keep", level="DEBUG")
    setup_logger("steuernummer.test_keep")
    assert logger.level == logging.DEBUG


def test_setup_logger_defaults_to_info() -> None:
    assert setup_logger("steuernummer.test_default").level == logging.INFO
