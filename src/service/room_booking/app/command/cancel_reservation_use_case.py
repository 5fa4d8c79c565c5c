from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.room_booking_metrics import RoomBookingMetrics
from src.service.room_booking.app.dto.room_outcome import (
    CancellationOutcome,
    ReservationCancelled,
    RoomNotFound,
)
from src.service.room_booking.app.interface.i_room_command_repo import IRoomCommandRepo
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from src.service.room_booking.domain.domain_event.room_activity_event import (
    ReservationCancelledEntry,
)


class CancelReservationUseCase:
    """
    Cancel a room's reservation.

    Always writes the Unoccupied state, even when the room is already empty,
    so repeated cancels succeed and each one records a `cancel` entry.
    """

    def __init__(
        self,
        *,
        room_command_repo: IRoomCommandRepo,
        activity_log_recorder: ActivityLogRecorder,
        metrics: RoomBookingMetrics,
    ) -> None:
        self.room_command_repo = room_command_repo
        self.activity_log_recorder = activity_log_recorder
        self.metrics = metrics

    @classmethod
    @inject
    def depends(
        cls,
        room_command_repo: IRoomCommandRepo = Depends(Provide[Container.room_command_repo]),
        activity_log_recorder: ActivityLogRecorder = Depends(
            Provide[Container.activity_log_recorder]
        ),
        metrics: RoomBookingMetrics = Depends(Provide[Container.metrics]),
    ) -> Self:
        return cls(
            room_command_repo=room_command_repo,
            activity_log_recorder=activity_log_recorder,
            metrics=metrics,
        )

    @Logger.io
    async def execute(self, *, room_id: str) -> CancellationOutcome:
        room = await self.room_command_repo.get_by_id(room_id=room_id)
        if room is None:
            self.metrics.record_cancellation(result='not_found')
            return RoomNotFound(room_id=room_id)

        cancelled_room = await self.room_command_repo.save(room=room.cancel())
        self.metrics.record_cancellation(result='cancelled')
        Logger.base.info(f'🧹 [CANCEL] Room {room_id} is now unoccupied')

        await self.activity_log_recorder.record(
            entry=ReservationCancelledEntry(room_id=cancelled_room.id)
        )
        return ReservationCancelled(room=cancelled_room)
