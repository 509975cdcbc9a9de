from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EzoRtdSettings(BaseSettings):
    logger_name: str = Field("ezo_rtd", min_length=1, validation_alias="EZO_RTD_LOGGER_NAME")
    log_level: LogLevel = Field("INFO", validation_alias="EZO_RTD_LOG_LEVEL")
    log_ring_size: int = Field(200, ge=1, validation_alias="EZO_RTD_LOG_RING_SIZE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> EzoRtdSettings:
    return EzoRtdSettings()
