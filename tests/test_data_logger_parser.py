"""Tests for the data logger storage interval parser."""
import pytest

from ezo_rtd.domain import DataLoggerStorageIntervalResponse, DataLoggerStorageIntervalSeconds
from ezo_rtd.errors import MalformedResponseError, ResponseParseError
from ezo_rtd.parsing import parse_data_logger_storage_interval_response


def test_parses_data_logger_storage_interval_response():
    assert parse_data_logger_storage_interval_response(b"?D,1\0") == DataLoggerStorageIntervalResponse(
        DataLoggerStorageIntervalSeconds(1)
    )
    assert parse_data_logger_storage_interval_response(b"?D,42\0") == DataLoggerStorageIntervalResponse(
        DataLoggerStorageIntervalSeconds(42)
    )


def test_parses_disabled_logger():
    assert parse_data_logger_storage_interval_response(b"?D,0\0").interval.seconds == 0


def test_leading_zeros_accepted():
    assert parse_data_logger_storage_interval_response(b"?D,0010\0").interval.seconds == 10


def test_parses_largest_interval():
    result = parse_data_logger_storage_interval_response(b"?D,4294967295\0")
    assert result.interval.seconds == 4294967295


def test_overflow_rejected():
    with pytest.raises(ResponseParseError, match="out of range"):
        parse_data_logger_storage_interval_response(b"?D,4294967296\0")


@pytest.mark.parametrize(
    "response",
    [
        b"\0",
        b"?D,\0",
        b"?D,-1\0",
        b"?D,+1\0",
        b"?D,foo\0",
        b"?D,1.5\0",
        b"?D, 1\0",
        b"?D,1 \0",
        b"?D,1_000\0",
        b"?D,\xd9\xa1\0",
        b"?d,1\0",
        b"D,1\0",
        b"?S,1\0",
    ],
)
def test_rejects_invalid_interval(response):
    with pytest.raises(ResponseParseError):
        parse_data_logger_storage_interval_response(response)


@pytest.mark.parametrize("response", [b"", b"\x01", b"?D,1", b"?D,1\0\0", b"?D,\xff\0"])
def test_malformed_framing(response):
    with pytest.raises(MalformedResponseError):
        parse_data_logger_storage_interval_response(response)


def test_parsing_is_idempotent():
    first = parse_data_logger_storage_interval_response(b"?D,300\0")
    second = parse_data_logger_storage_interval_response(b"?D,300\0")
    assert first == second
