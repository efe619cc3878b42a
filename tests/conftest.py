"""Shared test fixtures."""

import pytest

TIME_SEEK_RANGE = (
    "TimeSeekRange.dlna.org : npt=335.1-336.1/40445.4 "
    "bytes=1539686400-1540210688/304857907200"
)
AVAILABLE_SEEK_RANGE = (
    "availableSeekRange.dlna.org: 0 npt=0:00:00.000-0:00:48.716 "
    "bytes=0-5219255 cleartextbytes=0-5219255"
)
OPEN_ENDED_RANGE = "npt=10.0-/* bytes=24409920-198755327/198755328"

REFERENCE_HEADERS = [TIME_SEEK_RANGE, AVAILABLE_SEEK_RANGE, OPEN_ENDED_RANGE]


@pytest.fixture(params=REFERENCE_HEADERS)
def reference_header(request):
    return request.param


@pytest.fixture
def time_seek_range():
    return TIME_SEEK_RANGE


@pytest.fixture
def available_seek_range():
    return AVAILABLE_SEEK_RANGE


@pytest.fixture
def open_ended_range():
    return OPEN_ENDED_RANGE
