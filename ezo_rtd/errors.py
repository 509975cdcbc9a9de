"""
Exceptions raised while decoding EZO RTD responses.

Two kinds of failure exist. A ``MalformedResponseError`` means the buffer
handed over by the transport is not framed the way the device frames its
replies, so no grammar was even tried. A ``ResponseParseError`` means the
framing was fine but the text does not match what the command returns.
"""
from __future__ import annotations

from typing import Union

RawResponse = Union[bytes, str]


class EzoRtdError(Exception):
    """Base exception for all response decoding errors."""

    def __init__(self, message: str, response: RawResponse | None = None) -> None:
        super().__init__(message)
        self.response = response


class MalformedResponseError(EzoRtdError):
    """Raised when a response buffer breaks the nul-terminated UTF-8 framing."""


class ResponseParseError(EzoRtdError):
    """Raised when response text does not match the expected command grammar."""
