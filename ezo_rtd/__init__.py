from ezo_rtd.core import ResponseCode, split_status_byte, text_from_response
from ezo_rtd.domain import (
    Celsius,
    DataLoggerStorageIntervalResponse,
    DataLoggerStorageIntervalSeconds,
    Fahrenheit,
    Kelvin,
    Temperature,
    TemperatureResponse,
    TemperatureScale,
    TemperatureScaleResponse,
)
from ezo_rtd.errors import EzoRtdError, MalformedResponseError, ResponseParseError
from ezo_rtd.parsing import (
    parse_data_logger_storage_interval_response,
    parse_temperature_response,
    parse_temperature_scale_response,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Celsius",
    "DataLoggerStorageIntervalResponse",
    "DataLoggerStorageIntervalSeconds",
    "EzoRtdError",
    "Fahrenheit",
    "Kelvin",
    "MalformedResponseError",
    "ResponseCode",
    "ResponseParseError",
    "Temperature",
    "TemperatureResponse",
    "TemperatureScale",
    "TemperatureScaleResponse",
    "parse_data_logger_storage_interval_response",
    "parse_temperature_response",
    "parse_temperature_scale_response",
    "split_status_byte",
    "text_from_response",
]

try:
    __version__ = version("ezo-rtd")
except PackageNotFoundError:
    __version__ = "0.0.0"
