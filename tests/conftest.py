import pytest

from audience_formatter.core.settings import get_settings
from audience_formatter.formatter import Formatter
from audience_formatter.tables.registry import TableRegistry, build


@pytest.fixture
def formatter() -> Formatter:
    return Formatter()


@pytest.fixture
def tables() -> TableRegistry:
    return build()


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("LOG_LEVEL", "FORMATTER_TABLES_PATH", "FORMATTER_THREAD_COUNTRY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
