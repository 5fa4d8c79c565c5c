from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.room_booking_metrics import RoomBookingMetrics
from src.service.room_booking.app.dto.room_outcome import (
    ReservationOutcome,
    RoomConflict,
    RoomNotFound,
    RoomReserved,
)
from src.service.room_booking.app.interface.i_room_command_repo import IRoomCommandRepo
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from src.service.room_booking.domain.domain_event.room_activity_event import (
    ReservationConflictEntry,
    RoomReservedEntry,
)
from src.service.room_booking.domain.entity.room_entity import validate_guest_name


class ReserveRoomUseCase:
    """
    Reserve a room for a guest.

    State machine:
    - Unoccupied --reserve(g)--> Occupied(g); records `reserve`
    - Occupied(g0) --reserve(g)--> unchanged; records `conflict` (attempted=g, current=g0)
    - Unknown room: not found, nothing recorded

    The occupancy check and the write are two separate store calls with no
    compare-and-set between them. Two concurrent reservations of the same
    empty room can both pass the check; the later write wins.
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
        self.tracer = trace.get_tracer(__name__)

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
    async def execute(self, *, room_id: str, guest: str) -> ReservationOutcome:
        validate_guest_name(guest)

        with self.tracer.start_as_current_span('use_case.reserve_room') as span:
            span.set_attribute('room.id', room_id)

            room = await self.room_command_repo.get_by_id(room_id=room_id)
            if room is None:
                self.metrics.record_reservation(result='not_found')
                span.set_attribute('reservation.result', 'not_found')
                return RoomNotFound(room_id=room_id)

            if room.is_booked:
                conflict = RoomConflict(room=room, attempted_guest=guest)
                self.metrics.record_reservation(result='conflict')
                span.set_attribute('reservation.result', 'conflict')
                Logger.base.warning(f'⚠️ [RESERVE] Room {room_id}: {conflict.message}')

                await self.activity_log_recorder.record(
                    entry=ReservationConflictEntry(
                        room_id=room.id,
                        attempted_guest=guest,
                        current_guest=conflict.current_guest,
                    )
                )
                return conflict

            reserved_room = await self.room_command_repo.save(room=room.reserve(guest=guest))
            self.metrics.record_reservation(result='reserved')
            span.set_attribute('reservation.result', 'reserved')
            Logger.base.info(f'🔑 [RESERVE] Room {room_id} reserved by {guest}')

            await self.activity_log_recorder.record(
                entry=RoomReservedEntry(room_id=reserved_room.id, guest=guest)
            )
            return RoomReserved(room=reserved_room)
