import io

import pytest

from ecotrip.geo import make_point
from ecotrip.logger import Logger, LoggingMode


@pytest.fixture
def paris():
    return make_point(48.8566, 2.3522)


@pytest.fixture
def london():
    return make_point(51.5074, -0.1278)


@pytest.fixture
def brussels():
    return make_point(50.8503, 4.3517)


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def logger(log_stream):
    """Debug-level logger writing into an in-memory stream."""
    return Logger(LoggingMode.DEBUG, stream=log_stream)


@pytest.fixture
def silent_logger():
    return Logger(LoggingMode.NONE)
