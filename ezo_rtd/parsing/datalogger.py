from __future__ import annotations

import re

from ezo_rtd.core.text import ResponseBuffer, text_from_response
from ezo_rtd.domain.temperature import (
    DataLoggerStorageIntervalResponse,
    DataLoggerStorageIntervalSeconds,
    MAX_INTERVAL_SECONDS,
)
from ezo_rtd.errors import ResponseParseError
from ezo_rtd.logging import get_logger

logger = get_logger()

DATA_LOGGER_PREFIX = "?D,"

_UNSIGNED = re.compile(r"[0-9]+")


def parse_data_logger_storage_interval_response(response: ResponseBuffer) -> DataLoggerStorageIntervalResponse:
    """
    Parse the reply to the ``D,?`` command.

    The reply is ``?D,`` followed by an unsigned decimal number of seconds.

    Args:
        response: The device reply without the initial status byte.

    Returns:
        The number of seconds between stored readings.

    Raises:
        MalformedResponseError: If the buffer is not a nul-terminated UTF-8 string.
        ResponseParseError: If the prefix is missing or the number is not a 32-bit unsigned integer.
    """
    text = text_from_response(response)
    if not text.startswith(DATA_LOGGER_PREFIX):
        logger.info("interval_response_rejected", extra={"parser": "datalogger", "details": {"text": text, "reason": "prefix"}})
        raise ResponseParseError(f"Data logger response must start with {DATA_LOGGER_PREFIX!r}: {text!r}", text)

    digits = text[len(DATA_LOGGER_PREFIX):]
    if not _UNSIGNED.fullmatch(digits):
        logger.info("interval_response_rejected", extra={"parser": "datalogger", "details": {"text": text, "reason": "numeral"}})
        raise ResponseParseError(f"Invalid data logger interval: {digits!r}", text)

    seconds = int(digits)
    if seconds > MAX_INTERVAL_SECONDS:
        logger.info("interval_response_rejected", extra={"parser": "datalogger", "details": {"text": text, "reason": "overflow"}})
        raise ResponseParseError(f"Data logger interval out of range: {seconds}", text)

    logger.debug("interval_response_parsed", extra={"parser": "datalogger", "details": {"seconds": seconds}})
    return DataLoggerStorageIntervalResponse(DataLoggerStorageIntervalSeconds(seconds))
