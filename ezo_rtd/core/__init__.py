"""
Framing helpers shared by every response parser.

- ``text``: validation of the nul-terminated UTF-8 payload.
- ``status``: splitting the leading I2C response code off a raw reply.
"""
from ezo_rtd.core.status import ResponseCode, split_status_byte
from ezo_rtd.core.text import NUL, text_from_response

__all__ = ["NUL", "ResponseCode", "split_status_byte", "text_from_response"]
