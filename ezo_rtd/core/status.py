"""
Response codes carried in the first byte of a raw EZO I2C reply.

Transports that read the raw reply can use ``split_status_byte`` to check the
code and obtain the payload the parsers expect. The parsers never strip the
byte themselves.
"""
from __future__ import annotations

from enum import IntEnum

from ezo_rtd.core.text import ResponseBuffer
from ezo_rtd.errors import MalformedResponseError


class ResponseCode(IntEnum):
    SUCCESS = 1
    SYNTAX_ERROR = 2
    STILL_PROCESSING = 254
    NO_DATA = 255


def split_status_byte(raw: ResponseBuffer) -> tuple[ResponseCode, bytes]:
    data = bytes(raw)
    if not data:
        raise MalformedResponseError("Reply is empty, no status byte present", data)
    try:
        code = ResponseCode(data[0])
    except ValueError as exc:
        raise MalformedResponseError(f"Unknown response code 0x{data[0]:02x}", data) from exc
    return code, data[1:]
