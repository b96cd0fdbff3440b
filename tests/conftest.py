import pytest

from daterange_checker.config import get_config
from daterange_checker.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """DATERANGE_* 환경변수를 비우고 config 캐시와 logging 상태를 매 테스트 초기화."""
    monkeypatch.delenv("DATERANGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DATERANGE_MAX_ENUMERATION_DAYS", raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
    reset_logging()
