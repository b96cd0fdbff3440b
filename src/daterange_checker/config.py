import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckerConfig(BaseSettings):
    """라이브러리 설정. 환경변수(DATERANGE_*) 에서만 로드한다.

    호출 측 작업 디렉토리의 .env 는 읽지 않는다.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATERANGE_",
        extra="ignore",
    )

    log_level: str = "INFO"

    # None = 제한 없음. 수년 단위 range 의 일자 열거를 막고 싶을 때 설정.
    max_enumeration_days: int | None = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("max_enumeration_days")
    @classmethod
    def _check_max_days(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("max_enumeration_days must be positive")
        return v

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_config() -> CheckerConfig:
    return CheckerConfig()
