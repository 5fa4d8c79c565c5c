"""
HTTP contract of the room API

Runs the real routes, dependency wiring and exception handlers against the
in-memory store, and asserts on status codes, bodies and activity log order.
"""

from dependency_injector import providers
import pytest

from src.platform.config.di import container
from src.platform.constant.route_constant import (
    HEALTH,
    METRICS,
    ROOM_BASE,
    ROOM_CANCEL,
    ROOM_RESERVE,
    ROOT,
)
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from test.service.room_booking.fakes import FailingActivityLogSink, FailingRoomRepo


def _create_room(client, name='Suite 1', price=200) -> dict:
    response = client.post(ROOM_BASE, json={'name': name, 'price': price})
    assert response.status_code == 201
    return response.json()['room']


class TestRoomLifecycle:
    def test_full_booking_scenario(self, client, logged_actions):
        # Given: a new room
        response = client.post(ROOM_BASE, json={'name': 'Suite 1', 'price': 200})
        assert response.status_code == 201
        body = response.json()
        assert body['message'] == 'Room created'
        room = body['room']
        assert room['name'] == 'Suite 1'
        assert room['price'] == 200
        assert room['guest'] == 'None'
        assert room['isBooked'] is False
        room_id = room['id']

        # When: Bob reserves it
        response = client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Bob'})
        assert response.status_code == 200
        assert response.json()['message'] == 'Room reserved by Bob'
        assert response.json()['room']['guest'] == 'Bob'
        assert response.json()['room']['isBooked'] is True

        # Then: Carol is told Bob holds it
        response = client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Carol'})
        assert response.status_code == 409
        assert 'Bob' in response.json()['message']

        # When: Bob cancels
        response = client.put(ROOM_CANCEL.format(room_id=room_id))
        assert response.status_code == 200
        assert response.json()['message'] == 'Reservation cancelled'
        assert response.json()['room']['guest'] == 'None'
        assert response.json()['room']['isBooked'] is False

        # Then: Carol can reserve
        response = client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Carol'})
        assert response.status_code == 200
        assert response.json()['room']['guest'] == 'Carol'

        assert logged_actions() == ['create', 'reserve', 'conflict', 'cancel', 'reserve']

    def test_list_rooms(self, client):
        assert client.get(ROOM_BASE).json() == []

        first = _create_room(client, name='Suite 1')
        second = _create_room(client, name='Suite 2', price=99.5)

        response = client.get(ROOM_BASE)

        assert response.status_code == 200
        assert {room['id'] for room in response.json()} == {first['id'], second['id']}
        for room in response.json():
            assert set(room) == {'id', 'name', 'price', 'guest', 'isBooked'}

    def test_conflict_leaves_room_unchanged(self, client):
        room_id = _create_room(client)['id']
        client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Bob'})

        client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Carol'})

        [room] = client.get(ROOM_BASE).json()
        assert room['guest'] == 'Bob'

    def test_cancel_empty_room_succeeds(self, client, logged_actions):
        room_id = _create_room(client)['id']

        first = client.put(ROOM_CANCEL.format(room_id=room_id))
        second = client.put(ROOM_CANCEL.format(room_id=room_id))

        assert first.status_code == second.status_code == 200
        assert logged_actions() == ['create', 'cancel', 'cancel']


class TestRoomNotFound:
    def test_reserve_unknown_room(self, client, logged_actions):
        response = client.put(ROOM_RESERVE.format(room_id='does-not-exist'), json={'name': 'Bob'})

        assert response.status_code == 404
        assert response.json() == {'message': 'Room not found'}
        assert logged_actions() == []

    def test_cancel_unknown_room(self, client):
        response = client.put(ROOM_CANCEL.format(room_id='does-not-exist'))

        assert response.status_code == 404
        assert response.json() == {'message': 'Room not found'}


class TestRoomValidation:
    @pytest.mark.parametrize(
        'body',
        [
            {},
            {'name': 'Suite 1'},
            {'price': 200},
            {'name': '', 'price': 200},
            {'name': '   ', 'price': 200},
            {'name': 'Suite 1', 'price': -1},
            {'name': 'Suite 1', 'price': '200'},
            {'name': 'Suite 1', 'price': True},
        ],
    )
    def test_create_invalid_body(self, client, logged_actions, body):
        response = client.post(ROOM_BASE, json=body)

        # Rejected bodies fail like a failed write: generic 500, nothing stored or logged
        assert response.status_code == 500
        assert response.json() == {'message': 'Internal server error'}
        assert client.get(ROOM_BASE).json() == []
        assert logged_actions() == []

    @pytest.mark.parametrize('body', [{}, {'name': ''}, {'name': 'None'}, {'name': 42}])
    def test_reserve_invalid_body(self, client, body):
        room_id = _create_room(client)['id']

        response = client.put(ROOM_RESERVE.format(room_id=room_id), json=body)

        assert response.status_code == 500
        assert response.json() == {'message': 'Internal server error'}
        [room] = client.get(ROOM_BASE).json()
        assert room['isBooked'] is False


class TestActivityLogFailure:
    def test_sink_down_does_not_change_responses(self, client, room_repo, metrics):
        # Given: every activity log append fails
        sink = FailingActivityLogSink()
        recorder = ActivityLogRecorder(activity_log_sink=sink, metrics=metrics)

        with container.activity_log_recorder.override(providers.Object(recorder)):
            # When
            room_id = _create_room(client)['id']
            reserved = client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Bob'})
            conflict = client.put(ROOM_RESERVE.format(room_id=room_id), json={'name': 'Carol'})
            cancelled = client.put(ROOM_CANCEL.format(room_id=room_id))

        # Then
        assert reserved.status_code == 200
        assert conflict.status_code == 409
        assert cancelled.status_code == 200
        assert sink.attempts == 4
        assert room_repo.rooms[room_id].is_booked is False


class TestStoreFailure:
    @pytest.fixture
    def failing_client(self, client):
        failing_repo = FailingRoomRepo()
        with (
            container.room_command_repo.override(providers.Object(failing_repo)),
            container.room_query_repo.override(providers.Object(failing_repo)),
        ):
            yield client

    def test_list_returns_generic_500(self, failing_client, logged_actions):
        response = failing_client.get(ROOM_BASE)

        assert response.status_code == 500
        assert response.json() == {'message': 'Internal server error'}

    def test_create_returns_generic_500_and_logs_nothing(self, failing_client, logged_actions):
        response = failing_client.post(ROOM_BASE, json={'name': 'Suite 1', 'price': 200})

        assert response.status_code == 500
        assert 'connection refused' not in response.text
        assert logged_actions() == []

    def test_reserve_and_cancel_return_500(self, failing_client):
        reserve = failing_client.put(ROOM_RESERVE.format(room_id='room-1'), json={'name': 'Bob'})
        cancel = failing_client.put(ROOM_CANCEL.format(room_id='room-1'))

        assert reserve.status_code == cancel.status_code == 500


class TestCommonEndpoints:
    def test_root_greeting(self, client):
        response = client.get(ROOT)

        assert response.status_code == 200
        assert response.text == 'Hello Airbnb'

    def test_health(self, client):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_metrics_exposes_room_counters(self, client):
        _create_room(client)

        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'room_created_total' in response.text

    def test_cors_allows_any_origin(self, client):
        response = client.get(ROOM_BASE, headers={'Origin': 'http://example.com'})

        assert response.headers['access-control-allow-origin'] == '*'
