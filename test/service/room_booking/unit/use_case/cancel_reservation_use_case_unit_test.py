import pytest

from src.platform.exception.exceptions import StorageError
from src.service.room_booking.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.room_booking.app.dto.room_outcome import ReservationCancelled, RoomNotFound
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from src.service.room_booking.domain.entity.room_entity import (
    UNOCCUPIED,
    UNOCCUPIED_GUEST,
    Occupied,
    Room,
)
from test.service.room_booking.fakes import (
    FailingActivityLogSink,
    FailingRoomRepo,
    InMemoryRoomRepo,
)


@pytest.mark.unit
class TestCancelReservationUseCase:
    @pytest.fixture
    def room_repo(self):
        return InMemoryRoomRepo(
            [Room(id='room-1', name='Suite 1', price=200, occupancy=Occupied(guest='Bob'))]
        )

    @pytest.fixture
    def use_case(self, room_repo, activity_log_recorder, metrics):
        return CancelReservationUseCase(
            room_command_repo=room_repo,
            activity_log_recorder=activity_log_recorder,
            metrics=metrics,
        )

    @pytest.mark.asyncio
    async def test_cancel_occupied_room(self, use_case, room_repo, activity_log_sink):
        outcome = await use_case.execute(room_id='room-1')

        assert isinstance(outcome, ReservationCancelled)
        assert outcome.message == 'Reservation cancelled'
        assert outcome.room.guest == UNOCCUPIED_GUEST
        assert room_repo.rooms['room-1'].occupancy == UNOCCUPIED
        assert activity_log_sink.actions() == ['cancel']

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self, use_case, room_repo, activity_log_sink):
        first = await use_case.execute(room_id='room-1')
        second = await use_case.execute(room_id='room-1')

        assert isinstance(first, ReservationCancelled)
        assert isinstance(second, ReservationCancelled)
        assert room_repo.rooms['room-1'].is_booked is False
        # Every cancel writes and records, even on an already empty room
        assert len(room_repo.save_calls) == 2
        assert activity_log_sink.actions() == ['cancel', 'cancel']

    @pytest.mark.asyncio
    async def test_cancel_unknown_room(self, use_case, room_repo, activity_log_sink):
        outcome = await use_case.execute(room_id='missing')

        assert isinstance(outcome, RoomNotFound)
        assert room_repo.save_calls == []
        assert activity_log_sink.entries == []

    @pytest.mark.asyncio
    async def test_cancel_survives_sink_failure(self, room_repo, metrics):
        sink = FailingActivityLogSink()
        use_case = CancelReservationUseCase(
            room_command_repo=room_repo,
            activity_log_recorder=ActivityLogRecorder(activity_log_sink=sink, metrics=metrics),
            metrics=metrics,
        )

        outcome = await use_case.execute(room_id='room-1')

        assert isinstance(outcome, ReservationCancelled)
        assert room_repo.rooms['room-1'].is_booked is False

    @pytest.mark.asyncio
    async def test_cancel_store_failure(self, activity_log_recorder, activity_log_sink, metrics):
        use_case = CancelReservationUseCase(
            room_command_repo=FailingRoomRepo(),
            activity_log_recorder=activity_log_recorder,
            metrics=metrics,
        )

        with pytest.raises(StorageError):
            await use_case.execute(room_id='room-1')

        assert activity_log_sink.entries == []
