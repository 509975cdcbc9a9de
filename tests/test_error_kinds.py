"""Every rejected input raises exactly the documented error kind."""
import pytest

import ezo_rtd
from ezo_rtd import (
    EzoRtdError,
    MalformedResponseError,
    ResponseParseError,
    TemperatureScale,
    parse_data_logger_storage_interval_response,
    parse_temperature_response,
    parse_temperature_scale_response,
)

PARSERS = [
    parse_temperature_scale_response,
    parse_data_logger_storage_interval_response,
    lambda response: parse_temperature_response(response, TemperatureScale.CELSIUS),
]


@pytest.mark.parametrize("parser", PARSERS)
@pytest.mark.parametrize("response", [b"", b"\x01", b"?S,c", b"1\0\0", b"\xc3\0"])
def test_framing_errors_are_malformed_for_every_parser(parser, response):
    with pytest.raises(MalformedResponseError):
        parser(response)


@pytest.mark.parametrize("parser", PARSERS)
def test_empty_text_is_a_grammar_error_for_every_parser(parser):
    with pytest.raises(ResponseParseError):
        parser(b"\0")


def test_error_kinds_are_disjoint():
    assert not issubclass(MalformedResponseError, ResponseParseError)
    assert not issubclass(ResponseParseError, MalformedResponseError)
    assert issubclass(MalformedResponseError, EzoRtdError)
    assert issubclass(ResponseParseError, EzoRtdError)


def test_wrong_parser_for_command_is_grammar_error():
    with pytest.raises(ResponseParseError) as exc_info:
        parse_temperature_scale_response(b"?D,10\0")
    assert exc_info.value.response == "?D,10"
    with pytest.raises(ResponseParseError):
        parse_data_logger_storage_interval_response(b"?S,c\0")
    with pytest.raises(ResponseParseError):
        parse_temperature_response(b"?S,c\0", TemperatureScale.KELVIN)


def test_version_is_exposed():
    assert isinstance(ezo_rtd.__version__, str)
