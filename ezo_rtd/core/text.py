from __future__ import annotations

from typing import Union

from ezo_rtd.errors import MalformedResponseError

NUL = 0x00

ResponseBuffer = Union[bytes, bytearray, memoryview]


def text_from_response(response: ResponseBuffer) -> str:
    """
    Validate a nul-terminated response buffer and return its text.

    The buffer must hold exactly one NUL byte, in the last position, and the
    bytes before it must be valid UTF-8. The device only ever sends ASCII.

    Args:
        response: The device reply with any status byte already removed.

    Returns:
        The decoded text without the terminator.

    Raises:
        MalformedResponseError: If the framing or encoding is invalid.
    """
    data = bytes(response)
    if not data:
        raise MalformedResponseError("Response is empty", data)
    terminator = data.find(NUL)
    if terminator == -1:
        raise MalformedResponseError("Response is not nul-terminated", data)
    if terminator != len(data) - 1:
        raise MalformedResponseError(f"Response has an interior nul byte at index {terminator}", data)
    try:
        return data[:terminator].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedResponseError(f"Response is not valid UTF-8: {exc}", data) from exc
