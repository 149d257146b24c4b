# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from chrono_helper.helper import DateTimeHelper
from chrono_helper.utils.params import ParameterSet


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in (
        "CHRONO_HELPER_LOG_LEVEL",
        "CHRONO_HELPER_LOG_DIR",
        "CHRONO_HELPER_TIMEZONE",
        "CHRONO_HELPER_LOCALE",
    ):
        monkeypatch.delenv(name, raising=False)


# 1989-08-09T09:30:11Z（星期三）
@pytest.fixture(scope="session")
def ts() -> str:
    return "618658211"


@pytest.fixture
def helper() -> DateTimeHelper:
    return DateTimeHelper()


@pytest.fixture
def make_params():
    """
    Factory fixture for ParameterSet.

    Usage:
        params = make_params(from_timestamp="618658211", to_timestamp=True)
    """

    def _make(**kwargs) -> ParameterSet:
        return ParameterSet(kwargs)

    return _make
