from ezo_rtd.domain.temperature import (
    Celsius,
    DataLoggerStorageIntervalResponse,
    DataLoggerStorageIntervalSeconds,
    Fahrenheit,
    Kelvin,
    MAX_INTERVAL_SECONDS,
    Temperature,
    TemperatureResponse,
    TemperatureScale,
    TemperatureScaleResponse,
)

__all__ = [
    "Celsius",
    "DataLoggerStorageIntervalResponse",
    "DataLoggerStorageIntervalSeconds",
    "Fahrenheit",
    "Kelvin",
    "MAX_INTERVAL_SECONDS",
    "Temperature",
    "TemperatureResponse",
    "TemperatureScale",
    "TemperatureScaleResponse",
]
