from __future__ import annotations

from ezo_rtd.core.text import ResponseBuffer, text_from_response
from ezo_rtd.domain.temperature import TemperatureScale, TemperatureScaleResponse
from ezo_rtd.errors import ResponseParseError
from ezo_rtd.logging import get_logger

logger = get_logger()

# Exact replies to the scale query; matching is literal.
SCALE_RESPONSES: dict[str, TemperatureScale] = {
    "?S,c": TemperatureScale.CELSIUS,
    "?S,k": TemperatureScale.KELVIN,
    "?S,f": TemperatureScale.FAHRENHEIT,
}


def parse_temperature_scale_response(response: ResponseBuffer) -> TemperatureScaleResponse:
    """
    Parse the reply to the ``S,?`` command.

    Args:
        response: The device reply without the initial status byte.

    Returns:
        The scale the device is configured to report in.

    Raises:
        MalformedResponseError: If the buffer is not a nul-terminated UTF-8 string.
        ResponseParseError: If the text is not one of ``SCALE_RESPONSES``.
    """
    text = text_from_response(response)
    scale = SCALE_RESPONSES.get(text)
    if scale is None:
        logger.info("scale_response_rejected", extra={"parser": "scale", "details": {"text": text}})
        raise ResponseParseError(f"Unexpected temperature scale response: {text!r}", text)
    logger.debug("scale_response_parsed", extra={"parser": "scale", "details": {"scale": scale.value}})
    return TemperatureScaleResponse(scale)
