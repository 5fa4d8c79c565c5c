from collections.abc import Generator

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from test.service.room_booking.fakes import InMemoryRoomRepo, RecordingActivityLogSink
from test.test_main import create_test_app


@pytest.fixture
def client(
    room_repo: InMemoryRoomRepo,
    activity_log_recorder: ActivityLogRecorder,
) -> Generator[TestClient, None, None]:
    """API client backed by the in-memory room store and a recording sink"""
    with (
        container.room_command_repo.override(providers.Object(room_repo)),
        container.room_query_repo.override(providers.Object(room_repo)),
        container.activity_log_recorder.override(providers.Object(activity_log_recorder)),
    ):
        with TestClient(create_test_app(), raise_server_exceptions=False) as test_client:
            yield test_client


@pytest.fixture
def logged_actions(activity_log_sink: RecordingActivityLogSink):
    return activity_log_sink.actions
