import logging

import pytest

from potd.core.dates import CalendarDate


@pytest.fixture(autouse=True)
def reset_potd_logger():
    """Drop handlers the CLI attached so later tests do not write to stale streams"""
    yield
    potd_logger = logging.getLogger("potd")
    for handler in potd_logger.handlers[:]:
        potd_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config_path(tmp_path):
    """Path of a not-yet-existing configuration file"""
    return str(tmp_path / "potd_config.json")


@pytest.fixture
def sample_dates():
    return [
        CalendarDate(2023, 1, 30),
        CalendarDate(2023, 1, 31),
        CalendarDate(2023, 2, 1),
        CalendarDate(2023, 2, 2),
    ]
