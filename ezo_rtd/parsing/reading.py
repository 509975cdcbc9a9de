from __future__ import annotations

import re

from ezo_rtd.core.text import ResponseBuffer, text_from_response
from ezo_rtd.domain.temperature import Temperature, TemperatureResponse, TemperatureScale
from ezo_rtd.errors import ResponseParseError
from ezo_rtd.logging import get_logger

logger = get_logger()

# Decimal literal with optional minus sign, fraction and exponent; ASCII only.
_FLOAT = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_temperature_response(response: ResponseBuffer, scale: TemperatureScale | str) -> TemperatureResponse:
    """
    Parse the reply to the ``R`` command.

    The reply carries no unit, so the reading is tagged with ``scale``, which
    the caller must track (for example from an earlier scale query).
    No range checks are applied to the value.

    Args:
        response: The device reply without the initial status byte.
        scale: The scale the device is currently configured to use.

    Returns:
        The reading as a scale-tagged ``Temperature``.

    Raises:
        ValueError: If ``scale`` is not a known scale.
        MalformedResponseError: If the buffer is not a nul-terminated UTF-8 string.
        ResponseParseError: If the text is not a complete decimal number.
    """
    scale = TemperatureScale(scale)
    text = text_from_response(response)
    if not _FLOAT.fullmatch(text):
        logger.info("reading_response_rejected", extra={"parser": "reading", "details": {"text": text, "scale": scale.value}})
        raise ResponseParseError(f"Invalid temperature reading: {text!r}", text)

    temperature = Temperature.from_scale(scale, float(text))
    logger.debug("reading_response_parsed", extra={"parser": "reading", "details": {"value": temperature.value, "scale": scale.value}})
    return TemperatureResponse(temperature)
