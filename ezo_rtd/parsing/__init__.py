"""
Parsers for the replies of the EZO RTD sensor.

Each parser takes the reply buffer with the status byte already removed,
validates its framing and then applies the grammar of one command:

- ``scale``: the scale query (``S,?``).
- ``datalogger``: the data logger interval query (``D,?``).
- ``reading``: a single reading (``R``), tagged with a caller-supplied scale.
"""
from ezo_rtd.parsing.datalogger import DATA_LOGGER_PREFIX, parse_data_logger_storage_interval_response
from ezo_rtd.parsing.reading import parse_temperature_response
from ezo_rtd.parsing.scale import SCALE_RESPONSES, parse_temperature_scale_response

__all__ = [
    "DATA_LOGGER_PREFIX",
    "SCALE_RESPONSES",
    "parse_data_logger_storage_interval_response",
    "parse_temperature_response",
    "parse_temperature_scale_response",
]
