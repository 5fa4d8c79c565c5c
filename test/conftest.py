"""
Test Configuration and Fixtures

Environment variables are set before any application module is imported, since
settings and the loguru sinks are configured at import time.
"""

import os


def _early_setup_test_environment() -> None:
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('POSTGRES_DB', 'room_booking_test_db')
    os.environ.setdefault('ROOM_LOG_INDEX', 'room-logs-test')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.metrics.room_booking_metrics import (  # noqa: E402
    RoomBookingMetrics,
    metrics as global_metrics,
)
from src.service.room_booking.app.service.activity_log_recorder import (  # noqa: E402
    ActivityLogRecorder,
)
from test.service.room_booking.fakes import (  # noqa: E402
    InMemoryRoomRepo,
    RecordingActivityLogSink,
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    # Directory decides the marker so `-m unit` and `-m integration` select by layer
    for item in items:
        path = str(item.fspath)
        if f'{os.sep}unit{os.sep}' in path:
            item.add_marker(pytest.mark.unit)
        elif f'{os.sep}integration{os.sep}' in path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def room_repo() -> InMemoryRoomRepo:
    return InMemoryRoomRepo()


@pytest.fixture
def activity_log_sink() -> RecordingActivityLogSink:
    return RecordingActivityLogSink()


@pytest.fixture
def metrics() -> RoomBookingMetrics:
    return global_metrics


@pytest.fixture
def activity_log_recorder(
    activity_log_sink: RecordingActivityLogSink, metrics: RoomBookingMetrics
) -> ActivityLogRecorder:
    return ActivityLogRecorder(activity_log_sink=activity_log_sink, metrics=metrics)
